"""Unit tests for merging running and installed applications"""

import concurrent.futures
import sys
import os

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.search_models import ApplicationEntity
from core.app_merger import (
    build_alias_map,
    load_all_apps,
    merge_applications,
    sort_by_default_order,
)


def running(name):
    return ApplicationEntity(name=name, is_running=True)


def installed(name):
    return ApplicationEntity(name=name, bundle_path=f"/Applications/{name}.app")


class TestBuildAliasMap:
    """Test resolving running app names"""

    def test_only_differing_names_are_kept(self):
        aliases = build_alias_map(
            [running("Code"), running("Safari")],
            lambda name: "Visual Studio Code" if name == "Code" else name,
        )

        assert aliases == {"Code": "Visual Studio Code"}

    def test_failed_resolution_keeps_raw_name(self):
        def resolve(name):
            if name == "Broken":
                raise RuntimeError("no listing")
            return name + " App"

        aliases = build_alias_map([running("Broken"), running("Mail")], resolve)

        assert aliases == {"Mail": "Mail App"}

    def test_resolves_concurrently_with_executor(self):
        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            aliases = build_alias_map(
                [running("a"), running("b"), running("a")],
                str.upper,
                executor,
            )

        assert aliases == {"a": "A", "b": "B"}


class TestSortByDefaultOrder:
    """Test ordering with no query"""

    def test_recent_then_running_then_alphabetical(self):
        apps = [
            installed("zed"),
            installed("Books"),
            running("Xcode"),
            installed("Mail"),
            installed("apple Music"),
        ]

        ordered = sort_by_default_order(apps, ["Mail", "zed"])

        assert [app.name for app in ordered] == ["Mail", "zed", "Xcode", "apple Music", "Books"]

    def test_recent_then_alphabetical(self):
        merged = merge_applications(
            [], [installed("Safari"), installed("Notes"), installed("Mail")], recent_apps=["Safari"]
        )

        assert [app.name for app in merged] == ["Safari", "Mail", "Notes"]

    def test_unknown_recent_names_are_ignored(self):
        ordered = sort_by_default_order([installed("Notes")], ["Gone"])

        assert [app.name for app in ordered] == ["Notes"]


class TestMergeApplications:
    """Test the merge of the two sources"""

    def test_mail_safari_notes(self):
        merged = merge_applications(
            [running("Safari"), running("Mail")],
            [installed("Safari"), installed("Notes")],
        )

        assert [(app.name, app.is_running) for app in merged] == [
            ("Mail", True),
            ("Safari", True),
            ("Notes", False),
        ]
        assert merged[0].bundle_path is None
        assert merged[1].bundle_path == "/Applications/Safari.app"

    def test_names_are_unique(self):
        merged = merge_applications(
            [running("Safari"), running("Safari"), running("Helper")],
            [installed("Safari"), installed("Safari")],
        )

        names = [app.name for app in merged]
        assert sorted(names) == ["Helper", "Safari"]

    def test_alias_marks_bundle_running(self):
        merged = merge_applications(
            [running("Code")],
            [installed("Visual Studio Code")],
            aliases={"Code": "Visual Studio Code"},
        )

        assert len(merged) == 1
        assert merged[0].name == "Visual Studio Code"
        assert merged[0].is_running
        assert merged[0].bundle_path == "/Applications/Visual Studio Code.app"

    def test_unbundled_app_uses_resolved_name(self):
        merged = merge_applications(
            [running("Helper_Tool")],
            [],
            aliases={"Helper_Tool": "Helper Tool"},
        )

        assert [(app.name, app.is_running) for app in merged] == [("Helper Tool", True)]

    def test_merge_is_idempotent(self):
        running_apps = [running("Safari"), running("Code")]
        installed_apps = [installed("Safari"), installed("Visual Studio Code"), installed("Notes")]
        aliases = {"Code": "Visual Studio Code"}

        first = merge_applications(running_apps, installed_apps, aliases, ["Notes"])
        second = merge_applications(running_apps, installed_apps, aliases, ["Notes"])

        assert first == second

    def test_load_all_apps(self):
        apps = load_all_apps(
            [running("Code"), running("Finder")],
            [installed("Visual Studio Code"), installed("Calculator")],
            lambda name: "Visual Studio Code" if name == "Code" else name,
            recent_apps=["Calculator"],
        )

        assert [(app.name, app.is_running) for app in apps] == [
            ("Calculator", False),
            ("Finder", True),
            ("Visual Studio Code", True),
        ]
