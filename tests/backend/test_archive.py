"""
Tests for the archive log.

These tests cover:
- Append-only behaviour (count grows by one per append, duplicates kept)
- Defaults for status/pieces/ornamentType
- Required-field validation
- Absence of update/delete routes
"""

import pytest


class TestArchiveLog:
    """Tests for ArchiveLog service."""

    @pytest.mark.asyncio
    async def test_append_applies_defaults(self, mock_inventory_db):
        """Status defaults to Deleted, pieces to 0 and ornamentType to Gold."""
        from ornament_ledger.schemas.archive import ArchiveEntryCreate
        from ornament_ledger.services.archive_service import ArchiveLog

        record = await ArchiveLog(mock_inventory_db).append_entry(
            ArchiveEntryCreate(itemName="Ring", productGivenTo="Alice", weight=10, author="bob")
        )

        assert record.status == "Deleted"
        assert record.pieces == 0
        assert record.ornament_type == "Gold"
        assert record.deletion_date is None

    @pytest.mark.asyncio
    async def test_ornament_type_is_free_text(self, mock_inventory_db):
        """Archived ornamentType is not limited to Gold/Silver."""
        from ornament_ledger.schemas.archive import ArchiveEntryCreate
        from ornament_ledger.services.archive_service import ArchiveLog

        record = await ArchiveLog(mock_inventory_db).append_entry(
            ArchiveEntryCreate(
                itemName="Pendant",
                productGivenTo="Dan",
                weight=3,
                author="bob",
                ornamentType="Rose Gold",
            )
        )

        assert record.ornament_type == "Rose Gold"

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, mock_inventory_db):
        """list_entries returns records in the order they were appended."""
        from ornament_ledger.schemas.archive import ArchiveEntryCreate
        from ornament_ledger.services.archive_service import ArchiveLog

        archive = ArchiveLog(mock_inventory_db)
        for name in ["first", "second", "third"]:
            await archive.append_entry(
                ArchiveEntryCreate(itemName=name, productGivenTo="Alice", weight=1, author="bob")
            )

        records = await archive.list_entries()

        assert [r.item_name for r in records] == ["first", "second", "third"]


class TestArchiveRoutes:
    """Tests for /archive endpoints."""

    @pytest.mark.asyncio
    async def test_append_returns_201_and_keeps_fields(self, async_client, archive_payload):
        """POST /archive stores every supplied field."""
        response = await async_client.post("/archive", json=archive_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["itemName"] == "Chain"
        assert data["pieces"] == 2
        assert data["ornamentType"] == "Silver"
        assert data["status"] == "Deleted"
        assert data["deletionDate"].startswith("2024-10-15T12:00:00")
        assert data["date"].startswith("2024-10-01T09:30:00")

    @pytest.mark.asyncio
    async def test_n_appends_list_n_records_including_duplicates(
        self, async_client, archive_payload
    ):
        """Each append inserts a record; identical payloads are not deduplicated."""
        for _ in range(3):
            response = await async_client.post("/archive", json=archive_payload)
            assert response.status_code == 201

        response = await async_client.get("/archive")

        assert response.status_code == 200
        records = response.json()
        assert len(records) == 3
        assert len({r["id"] for r in records}) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["itemName", "productGivenTo", "weight", "author"])
    async def test_append_missing_required_field_returns_400(
        self, async_client, mock_inventory_db, archive_payload, field
    ):
        """Archive appends require the same fields as active stock."""
        payload = {k: v for k, v in archive_payload.items() if k != field}

        response = await async_client.post("/archive", json=payload)

        assert response.status_code == 400
        assert await mock_inventory_db.archive.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_append_out_of_range_weight_returns_400(self, async_client, mock_inventory_db):
        """A weight that overflows to infinity is rejected."""
        body = (
            '{"itemName": "Chain", "productGivenTo": "Carol", '
            '"weight": 1e400, "author": "bob"}'
        )

        response = await async_client.post(
            "/archive", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert await mock_inventory_db.archive.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_archive_has_no_update_or_delete(self, async_client, archive_payload):
        """Existing records cannot be changed or removed through the API."""
        created = (await async_client.post("/archive", json=archive_payload)).json()

        put = await async_client.put(f"/archive/{created['id']}", json={"status": "Restored"})
        delete = await async_client.delete(f"/archive/{created['id']}")

        assert put.status_code in (404, 405)
        assert delete.status_code in (404, 405)
        records = (await async_client.get("/archive")).json()
        assert len(records) == 1
        assert records[0]["status"] == "Deleted"
