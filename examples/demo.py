#!/usr/bin/env python3
"""Demo: Using DevAssist as a Python library.

Runs the whole pipeline against an in-memory pull-request source, so it works
offline. Swap ``InMemorySource`` for ``create_pr_source(config)`` to query GitHub.
"""

import asyncio

from devassist.assist import DevAssist
from devassist.config import ProjectConfig
from devassist.models import PullRequest, RecordContext
from devassist.sources import PullRequestSource, StaticContextSource
from devassist.ui.markdown import render_report


class InMemorySource(PullRequestSource):
    def __init__(self, prs: dict[str, list[PullRequest]]) -> None:
        self.prs = prs

    async def get_merged_prs(self, path: str) -> list[PullRequest]:
        if path.startswith("unpackaged/ui/"):
            raise ConnectionError("ui mirror unreachable")
        return self.prs.get(path, [])


async def main():
    config = ProjectConfig()
    config.repository.owner = "acme"
    config.repository.name = "metadata"

    tier_pr = PullRequest(
        number=12,
        title="Add Tier field to Contact",
        merged_at="2025-02-01T10:00:00Z",
        files=["force-app/main/default/objects/Contact/fields/Tier__c.field-meta.xml"],
    )
    source = InMemorySource({"force-app/main/default/objects/Contact/fields/": [tier_pr]})

    # 1. Resolve the record the user is looking at
    context_source = StaticContextSource(
        profile="Agent",
        records={"0035g00000XyZAbAAN": RecordContext(object_name="Contact", record_type="Support")},
    )
    assist = DevAssist(context_source, source, config)

    # 2. Infer paths and aggregate merged PRs
    report = await assist.run("0035g00000XyZAbAAN")

    print(f"Inferred {len(report.paths)} paths:")
    for path in report.paths:
        print(f"  {path}")

    # 3. Render
    print()
    print(render_report(report))


if __name__ == "__main__":
    asyncio.run(main())
