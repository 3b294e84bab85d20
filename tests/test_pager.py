"""Tests for the pager state machine."""

import httpx
import pytest

from codeengine_client.exceptions import PagerExhaustedError, ServerError, ValidationError
from codeengine_client.models import ConfigMap, ConfigMapList, PaginationListNextMetadata
from codeengine_client.options import ListConfigMapsOptions
from codeengine_client.pager import Pager, PagerState, next_cursor


class FakeListOperation:
    """List operation serving predefined pages, recording the options it got."""

    def __init__(self, pages):
        self._pages = list(pages)
        self.calls = []

    async def __call__(self, options):
        self.calls.append(options)
        page = self._pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page


def page(names, start=None, href=None):
    next_meta = None
    if start is not None or href is not None:
        next_meta = {"start": start, "href": href}
    return ConfigMapList.model_validate(
        {"configmaps": [{"name": n} for n in names], "next": next_meta}
    )


@pytest.fixture
def options():
    return ListConfigMapsOptions(project_id="abc", limit=2)


class TestNextCursor:
    def test_start_preferred(self):
        meta = PaginationListNextMetadata(start="tok", href="https://x/v2/things?start=other")
        assert next_cursor(meta) == "tok"

    def test_start_parsed_from_href(self):
        meta = PaginationListNextMetadata(href="https://x/v2/projects/abc/configmaps?limit=2&start=tok2")
        assert next_cursor(meta) == "tok2"

    def test_no_cursor(self):
        assert next_cursor(None) is None
        assert next_cursor(PaginationListNextMetadata()) is None
        assert next_cursor(PaginationListNextMetadata(href="https://x/v2/things?limit=2")) is None


class TestPager:
    """Tests for Pager."""

    @pytest.mark.asyncio
    async def test_walks_all_pages(self, options):
        fetch = FakeListOperation([
            page(["a", "b"], start="t1"),
            page(["c", "d"], start="t2"),
            page(["e"]),
        ])
        pager = Pager(fetch, options, "configmaps")

        items = []
        while pager.has_next():
            items.extend(await pager.get_next())

        assert [i.name for i in items] == ["a", "b", "c", "d", "e"]
        assert not pager.has_next()
        assert pager.state is PagerState.EXHAUSTED
        assert pager.pages_fetched == 3
        assert [c.start for c in fetch.calls] == [None, "t1", "t2"]
        assert all(c.limit == 2 and c.project_id == "abc" for c in fetch.calls)

    @pytest.mark.asyncio
    async def test_get_next_after_exhausted_raises(self, options):
        pager = Pager(FakeListOperation([page(["a"])]), options, "configmaps")
        await pager.get_next()

        with pytest.raises(PagerExhaustedError):
            await pager.get_next()

    @pytest.mark.asyncio
    async def test_get_all(self, options):
        fetch = FakeListOperation([page(["a", "b"], start="t1"), page(["c"])])
        items = await Pager(fetch, options, "configmaps").get_all()
        assert [i.name for i in items] == ["a", "b", "c"]
        assert all(isinstance(i, ConfigMap) for i in items)

    @pytest.mark.asyncio
    async def test_failure_is_sticky(self, options):
        failure = ServerError("boom", status_code=500)
        fetch = FakeListOperation([page(["a", "b"], start="t1"), failure, page(["c"])])
        pager = Pager(fetch, options, "configmaps")

        assert [i.name for i in await pager.get_next()] == ["a", "b"]
        with pytest.raises(ServerError):
            await pager.get_next()

        assert pager.state is PagerState.FAILED
        assert not pager.has_next()

        with pytest.raises(ServerError) as exc_info:
            await pager.get_next()
        assert exc_info.value is failure
        assert len(fetch.calls) == 2

    @pytest.mark.asyncio
    async def test_get_all_is_all_or_nothing(self, options):
        fetch = FakeListOperation([page(["a"], start="t1"), ServerError("boom")])
        pager = Pager(fetch, options, "configmaps")

        with pytest.raises(ServerError):
            await pager.get_all()
        assert pager.state is PagerState.FAILED

    @pytest.mark.asyncio
    async def test_get_all_on_failed_pager_raises_again(self, options):
        failure = ServerError("boom", status_code=500)
        fetch = FakeListOperation([page(["a"], start="t1"), failure])
        pager = Pager(fetch, options, "configmaps")

        with pytest.raises(ServerError):
            await pager.get_all()
        with pytest.raises(ServerError) as exc_info:
            await pager.get_all()

        assert exc_info.value is failure
        assert len(fetch.calls) == 2

    @pytest.mark.asyncio
    async def test_iterating_failed_pager_raises(self, options):
        failure = ServerError("boom", status_code=500)
        pager = Pager(FakeListOperation([failure]), options, "configmaps")

        with pytest.raises(ServerError):
            await pager.get_next()
        with pytest.raises(ServerError) as exc_info:
            async for _ in pager:
                pass

        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_get_all_on_exhausted_pager_is_empty(self, options):
        pager = Pager(FakeListOperation([page(["a"])]), options, "configmaps")
        await pager.get_all()
        assert await pager.get_all() == []

    @pytest.mark.asyncio
    async def test_empty_page_with_cursor_continues(self, options):
        fetch = FakeListOperation([page([], start="t1"), page(["a"])])
        pager = Pager(fetch, options, "configmaps")

        assert await pager.get_next() == []
        assert pager.has_next()
        assert [i.name for i in await pager.get_next()] == ["a"]

    @pytest.mark.asyncio
    async def test_cursor_from_href(self, options):
        fetch = FakeListOperation([
            page(["a"], href="https://x/v2/projects/abc/configmaps?limit=2&start=from-href"),
            page(["b"]),
        ])
        await Pager(fetch, options, "configmaps").get_all()
        assert fetch.calls[1].start == "from-href"

    @pytest.mark.asyncio
    async def test_async_iteration_yields_pages(self, options):
        fetch = FakeListOperation([page(["a", "b"], start="t1"), page(["c"])])
        pages = [[i.name for i in p] async for p in Pager(fetch, options, "configmaps")]
        assert pages == [["a", "b"], ["c"]]

    @pytest.mark.asyncio
    async def test_options_not_mutated(self, options):
        fetch = FakeListOperation([page(["a"], start="t1"), page(["b"])])
        await Pager(fetch, options, "configmaps").get_all()

        assert options.start is None
        assert fetch.calls[0] is not options

    @pytest.mark.asyncio
    async def test_resume_from_start_token(self, options):
        fetch = FakeListOperation([page(["z"])])
        await Pager(fetch, options, "configmaps", start="resume").get_all()
        assert fetch.calls[0].start == "resume"

    def test_prefilled_start_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Pager(FakeListOperation([]), ListConfigMapsOptions(project_id="abc", start="t"), "configmaps")
        assert "start" in exc_info.value.field_errors

    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Pager(FakeListOperation([]), ListConfigMapsOptions(project_id="abc", limit=-1), "configmaps")
        assert "limit" in exc_info.value.field_errors


class TestPagerOverHTTP:
    """Pager driven through the real config map list operation."""

    @pytest.mark.asyncio
    async def test_config_map_pages(self, client, server):
        server.queue(
            httpx.Response(200, json={"configmaps": [{"name": "cm1"}], "next": {"start": "tok1"}}),
            httpx.Response(200, json={"configmaps": [{"name": "cm2"}]}),
        )

        pager = client.config_maps.pager(ListConfigMapsOptions(project_id="abc", limit=1))
        names = [cm.name for cm in await pager.get_all()]

        assert names == ["cm1", "cm2"]
        assert not pager.has_next()
        first, second = server.requests
        assert first.url.path == "/v2/projects/abc/configmaps"
        assert dict(first.url.params) == {"limit": "1"}
        assert second.url.path == "/v2/projects/abc/configmaps"
        assert dict(second.url.params) == {"limit": "1", "start": "tok1"}

    @pytest.mark.asyncio
    async def test_http_failure_on_second_page(self, client, server):
        server.queue(
            httpx.Response(200, json={"configmaps": [{"name": "cm1"}], "next": {"start": "tok1"}}),
            httpx.Response(500, json={"errors": [{"code": "internal", "message": "oops"}]}),
        )
        pager = client.config_maps.pager(ListConfigMapsOptions(project_id="abc", limit=1))

        await pager.get_next()
        with pytest.raises(ServerError):
            await pager.get_next()
        with pytest.raises(ServerError):
            await pager.get_next()

        assert server.call_count == 2
