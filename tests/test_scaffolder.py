# -*- coding: utf-8 -*-
"""
test_scaffolder

End-to-end tests for the sample scaffolder and resetter.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from newmodule.conf import DEFAULT_SETTINGS, ScaffoldSettings
from newmodule.core.reporting import ScaffoldReport
from newmodule.core.request import ScaffoldRequest
from newmodule.core.scaffolder import SampleResetter, SampleScaffolder
from tests.sample_repository import REFERENCE_PACKAGE_PATH, ReferenceRepository


@dataclass
class ScaffoldingHelper:
    """Coordinate scaffolding runs for assertions."""

    repository: ReferenceRepository
    settings: ScaffoldSettings = DEFAULT_SETTINGS

    def scaffold(self, sample_name: str) -> ScaffoldReport:
        """Run the scaffolder for ``sample_name`` with a fixed copyright year."""

        request = ScaffoldRequest.build(sample_name, self.repository.root)
        return SampleScaffolder(self.settings, year=2030).scaffold(request)


class TestSampleScaffolder:
    """Test suite covering complete scaffolding runs."""

    def test_display_new_map(self, repository: ReferenceRepository) -> None:
        """A successful run produces the renamed and rewritten sample."""

        report = ScaffoldingHelper(repository).scaffold("Display New Map")
        destination = repository.root / "display-new-map"
        package_directory = destination / "src/main/java/com/esri/arcgismaps/sample/displaynewmap"

        assert report.succeeded
        assert report.failure is None
        assert report.root == destination
        assert (destination / "README.md").read_text(encoding="utf-8") == "# Display New Map"
        for path in (
            destination / "build.gradle",
            package_directory / "MainActivity.kt",
            package_directory / "components" / "MapViewModel.kt",
            package_directory / "screens" / "MainScreen.kt",
        ):
            content = path.read_text(encoding="utf-8")
            assert "sample.displaynewmap" in content
            assert "sample.displaycomposablemapview" not in content
        assert not (destination / "build").exists()
        assert not (destination / REFERENCE_PACKAGE_PATH).exists()
        assert not (destination / "display-composable-mapview.png").exists()
        assert (destination / "src/main/AndroidManifest.xml").exists()

    def test_reference_sample_is_untouched(self, repository: ReferenceRepository) -> None:
        """Scaffolding never modifies the reference sample."""

        before = repository.snapshot(repository.reference)
        ScaffoldingHelper(repository).scaffold("Display New Map")

        assert repository.snapshot(repository.reference) == before

    def test_second_run_aborts_without_changes(self, repository: ReferenceRepository) -> None:
        """Scaffolding the same name twice fails and keeps the first tree intact."""

        helper = ScaffoldingHelper(repository)
        assert helper.scaffold("Display New Map").succeeded
        destination = repository.root / "display-new-map"
        before = repository.snapshot(destination)

        report = helper.scaffold("Display New Map")

        assert not report.succeeded
        assert report.failure is not None
        assert report.failure.step == "create_files_and_folders"
        assert "already exists" in report.failure.message
        assert "SampleExistsError" in report.failure.trace
        assert repository.snapshot(destination) == before

    def test_missing_template_stops_run(
        self,
        repository: ReferenceRepository,
        template_copy: Path,
    ) -> None:
        """A missing template fails the first step and skips the others."""

        (template_copy / "MainScreenTemplate.kt").unlink()
        settings = DEFAULT_SETTINGS.derive(template_directory=template_copy)

        report = ScaffoldingHelper(repository, settings).scaffold("Display New Map")
        destination = repository.root / "display-new-map"

        assert report.failure is not None
        assert report.failure.step == "create_files_and_folders"
        assert "MainScreenTemplate.kt" in report.failure.message
        # No rollback: the partially created tree stays behind.
        assert destination.is_dir()
        assert (destination / "build").exists()

    def test_failure_in_content_step_is_reported(self, repository: ReferenceRepository) -> None:
        """An unreadable target file surfaces as a content step failure."""

        (repository.reference / "build.gradle").unlink()

        report = ScaffoldingHelper(repository).scaffold("Display New Map")

        assert report.failure is not None
        assert report.failure.step == "update_sample_content"
        assert "build.gradle" in report.failure.message
        assert (repository.root / "display-new-map" / "README.md").read_text(encoding="utf-8") == (
            "# Display New Map"
        )

    def test_steps_run_in_order(self) -> None:
        """The orchestrator exposes the three steps in execution order."""

        names = [name for name, _ in SampleScaffolder().steps()]

        assert names == ["create_files_and_folders", "delete_unwanted_files", "update_sample_content"]


class TestSampleResetter:
    """Test suite covering removal of scaffolded samples."""

    def test_exposes_settings(self) -> None:
        """The resetter shares its layout settings with callers."""

        settings = DEFAULT_SETTINGS.derive(reference_sample="other-sample")

        assert SampleResetter(settings).settings is settings
        assert SampleResetter().settings is DEFAULT_SETTINGS

    def test_reset_removes_sample(self, repository: ReferenceRepository) -> None:
        """A scaffolded sample directory is deleted entirely."""

        ScaffoldingHelper(repository).scaffold("Display New Map")
        request = ScaffoldRequest.build("Display New Map", repository.root)

        report = SampleResetter().reset(request)

        assert report.succeeded
        assert report.removed == [repository.root / "display-new-map"]
        assert not (repository.root / "display-new-map").exists()
        assert repository.reference.is_dir()

    def test_reset_missing_sample_is_skipped(self, repository: ReferenceRepository) -> None:
        """Resetting a name that was never scaffolded changes nothing."""

        request = ScaffoldRequest.build("Never Created", repository.root)

        report = SampleResetter().reset(request)

        assert report.succeeded
        assert report.skipped == [repository.root / "never-created"]

    def test_reset_allows_scaffolding_again(self, repository: ReferenceRepository) -> None:
        """After a reset the same sample name can be scaffolded again."""

        helper = ScaffoldingHelper(repository)
        helper.scaffold("Display New Map")
        SampleResetter().reset(ScaffoldRequest.build("Display New Map", repository.root))

        assert helper.scaffold("Display New Map").succeeded


# The End
