import asyncio

import pytest

from src.integrations.clients.mocks.local_coverage_catalogue import DEFAULT_COVERAGES, LocalCoverageCatalogueClient
from src.integrations.contracts.interfaces import CoverageCatalogueClient, CoverageOption
from src.onboarding.coverage_catalog import CoverageCatalog


class CountingClient(CoverageCatalogueClient):
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    async def list_coverages(self):
        self.calls += 1
        await asyncio.sleep(0)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.mark.asyncio
async def test_catalog_fetches_once_and_caches():
    client = CountingClient([CoverageOption("A", "Civil Liability"), CoverageOption("B", "Theft")])
    catalog = CoverageCatalog(client)

    first = await catalog.get_options()
    second = await catalog.get_options()

    assert first == [{"label": "Civil Liability", "value": "A"}, {"label": "Theft", "value": "B"}]
    assert second == first
    assert client.calls == 1
    assert catalog.loaded
    assert catalog.name_for("B") == "Theft"
    assert catalog.name_for("Z") is None


@pytest.mark.asyncio
async def test_concurrent_loads_share_one_fetch():
    client = CountingClient([CoverageOption("A", "Civil Liability")])
    catalog = CoverageCatalog(client)

    results = await asyncio.gather(catalog.load(), catalog.load(), catalog.load())

    assert client.calls == 1
    assert all(len(r) == 1 for r in results)


@pytest.mark.asyncio
async def test_failed_fetch_is_logged_and_retried(caplog):
    client = CountingClient(ConnectionError("catalogue down"), [CoverageOption("A", "Civil Liability")])
    catalog = CoverageCatalog(client)

    assert await catalog.get_options() == []
    assert catalog.loaded is False
    assert "Coverages load error" in caplog.text

    assert await catalog.get_options() == [{"label": "Civil Liability", "value": "A"}]
    assert client.calls == 2


@pytest.mark.asyncio
async def test_local_catalogue_defaults_and_yaml_file(tmp_path):
    default = await LocalCoverageCatalogueClient().list_coverages()
    assert [c.id for c in default] == [c["id"] for c in DEFAULT_COVERAGES]

    path = tmp_path / "coverages.yml"
    path.write_text("coverages:\n  - Id: X1\n    Name: Fire\n    basePremium: 10\n", encoding="utf-8")
    from_file = await LocalCoverageCatalogueClient(path=path).list_coverages()
    assert from_file == [CoverageOption("X1", "Fire")]


def test_local_catalogue_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalCoverageCatalogueClient(path=tmp_path / "missing.yml")
