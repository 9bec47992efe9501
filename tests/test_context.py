"""Tests for record context resolution."""

from __future__ import annotations

import pytest

from devassist.context import extract_record_id, resolve_context
from devassist.exceptions import ContextUnavailableError, ProfileUnavailableError
from devassist.models import RecordContext
from devassist.sources import StaticContextSource
from devassist.sources.base import ContextSource


class FailingContextSource(ContextSource):
    def __init__(self, fail_profile: bool = False, fail_record: bool = False) -> None:
        self.fail_profile = fail_profile
        self.fail_record = fail_record

    async def get_user_profile_name(self) -> str | None:
        if self.fail_profile:
            raise ProfileUnavailableError("profile service down")
        return "Agent"

    async def get_record_context(self, record_id: str) -> RecordContext:
        if self.fail_record:
            raise ContextUnavailableError("record service down")
        return RecordContext(object_name="Case", record_type="Escalation")


class TestExtractRecordId:
    def test_lightning_url(self):
        url = "https://acme.lightning.force.com/lightning/r/Contact/0035g00000XyZAbAAN/view"
        assert extract_record_id(url) == "0035g00000XyZAbAAN"

    def test_no_record_in_url(self):
        assert extract_record_id("https://acme.lightning.force.com/lightning/page/home") is None

    def test_requires_trailing_segment(self):
        assert extract_record_id("https://acme.lightning.force.com/lightning/r/Contact/003") is None


class TestResolveContext:
    @pytest.mark.asyncio
    async def test_both_available(self):
        resolved = await resolve_context(FailingContextSource(), "500xx")
        assert resolved.is_ready
        assert resolved.record == RecordContext(object_name="Case", record_type="Escalation")
        assert resolved.profile == "Agent"

    @pytest.mark.asyncio
    async def test_profile_failure_degrades(self):
        resolved = await resolve_context(FailingContextSource(fail_profile=True), "500xx")
        assert resolved.is_ready
        assert resolved.profile is None

    @pytest.mark.asyncio
    async def test_record_failure_not_ready(self):
        resolved = await resolve_context(FailingContextSource(fail_record=True), "500xx")
        assert not resolved.is_ready
        assert resolved.profile == "Agent"

    @pytest.mark.asyncio
    async def test_empty_profile_is_absent(self):
        source = StaticContextSource(profile="", default=RecordContext(object_name="Lead"))
        resolved = await resolve_context(source, "00Qxx")
        assert resolved.profile is None


class TestStaticContextSource:
    @pytest.mark.asyncio
    async def test_known_record(self):
        record = RecordContext(object_name="Account")
        source = StaticContextSource(profile="Sales", records={"001xx": record})
        assert await source.get_record_context("001xx") == record
        assert await source.get_user_profile_name() == "Sales"

    @pytest.mark.asyncio
    async def test_unknown_record_raises(self):
        source = StaticContextSource()
        with pytest.raises(ContextUnavailableError):
            await source.get_record_context("001xx")
