"""
Archive router: append-only log of removed stock.
"""
from fastapi import APIRouter, Depends, status

from ornament_ledger.dependencies.database import get_archive_log
from ornament_ledger.schemas.archive import ArchiveEntryCreate, ArchiveEntryResponse
from ornament_ledger.services.archive_service import ArchiveLog

router = APIRouter(prefix="/archive", tags=["Archive"])


@router.get(
    "",
    response_model=list[ArchiveEntryResponse],
    summary="List archive",
)
async def list_archive(archive: ArchiveLog = Depends(get_archive_log)):
    """List all archived records in the order they were added."""
    return await archive.list_entries()


@router.post(
    "",
    response_model=ArchiveEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Append archive record",
)
async def append_archive(
    body: ArchiveEntryCreate,
    archive: ArchiveLog = Depends(get_archive_log),
):
    """
    Append a copy of a removed stock entry.
    
    - **itemName**, **productGivenTo**, **weight**, **author**: required
    - **pieces**, **ornamentType**, **date**: copied from the removed entry
    - **status**: default "Deleted"
    - **deletionDate**: when the entry was removed
    
    Records are never updated or removed, and duplicates are kept.
    """
    return await archive.append_entry(body)
