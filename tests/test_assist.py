"""Tests for the DevAssist pipeline."""

from __future__ import annotations

import pytest

from devassist.assist import DevAssist
from devassist.exceptions import InvalidContextError
from devassist.models import RecordContext
from devassist.sources import StaticContextSource

FIELDS_PATH = "force-app/main/default/objects/Contact/fields/"
LAYOUT_PATH = "unpackaged/ui/layouts/Contact-Agent.layout-meta.xml"


class TestDevAssist:
    @pytest.mark.asyncio
    async def test_run_end_to_end(self, fake_source, config, contact_pr):
        fake_source.responses = {FIELDS_PATH: [contact_pr]}
        context_source = StaticContextSource(
            profile="Agent",
            records={"003xx": RecordContext(object_name="Contact", record_type="Support")},
        )
        assist = DevAssist(context_source, fake_source, config)

        report = await assist.run("003xx")

        assert report.record.object_name == "Contact"
        assert report.profile == "Agent"
        assert len(report.paths) == 12
        assert fake_source.calls and set(fake_source.calls) == set(report.paths)
        assert len(report.result) == 1
        link = report.result[0].file_links[0]
        assert link.url == (
            "https://example.com/repo/blob/main/"
            "force-app/main/default/objects/Contact/fields/Tier__c.field-meta.xml"
        )

    @pytest.mark.asyncio
    async def test_run_without_record_skips_inference(self, fake_source, config):
        assist = DevAssist(StaticContextSource(profile="Agent"), fake_source, config)

        report = await assist.run("missing")

        assert report.record is None
        assert report.paths == []
        assert len(report.result) == 0
        assert fake_source.calls == []

    @pytest.mark.asyncio
    async def test_lookup_without_profile(self, fake_source, config):
        assist = DevAssist(StaticContextSource(), fake_source, config)
        report = await assist.lookup(RecordContext(object_name="Contact"), None)
        assert len(report.paths) == 3
        assert len(fake_source.calls) == 3

    @pytest.mark.asyncio
    async def test_invalid_context_issues_no_lookups(self, fake_source, config):
        assist = DevAssist(StaticContextSource(), fake_source, config)
        with pytest.raises(InvalidContextError):
            await assist.lookup(RecordContext(object_name=""), "Agent")
        assert fake_source.calls == []

    @pytest.mark.asyncio
    async def test_configured_roots(self, fake_source, config):
        config.inference.source_roots = ["force-app/main/default"]
        assist = DevAssist(StaticContextSource(), fake_source, config)
        report = await assist.lookup(RecordContext(object_name="Contact"), "Agent")
        assert report.paths == [
            "force-app/main/default/objects/Contact/fields/",
            "force-app/main/default/flexipages/Contact_Agent.flexipage-meta.xml",
            "force-app/main/default/layouts/Contact-Agent.layout-meta.xml",
        ]

    @pytest.mark.asyncio
    async def test_dedupe_passthrough(self, fake_source, config, contact_pr):
        fake_source.responses = {FIELDS_PATH: [contact_pr], LAYOUT_PATH: [contact_pr]}
        record = RecordContext(object_name="Contact")

        plain = await DevAssist(StaticContextSource(), fake_source, config).lookup(record, "Agent")
        deduped = await DevAssist(StaticContextSource(), fake_source, config, dedupe=True).lookup(
            record, "Agent"
        )

        assert len(plain.result) == 2
        assert len(deduped.result) == 1

    @pytest.mark.asyncio
    async def test_report_to_dict(self, fake_source, config, contact_pr):
        fake_source.responses = {FIELDS_PATH: [contact_pr]}
        fake_source.failing = {LAYOUT_PATH}
        assist = DevAssist(StaticContextSource(), fake_source, config)

        data = (await assist.lookup(RecordContext(object_name="Contact"), "Agent")).to_dict()

        assert data["record"]["object_name"] == "Contact"
        assert data["pull_requests"][0]["number"] == 7
        assert data["pull_requests"][0]["merged_at"] == "2025-03-14T09:26:53Z"
        assert data["failures"][0]["path"] == LAYOUT_PATH
