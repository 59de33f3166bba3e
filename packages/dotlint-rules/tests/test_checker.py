"""Tests for rule orchestration and run summaries."""

import pytest
from dotlint_core.config import Config
from dotlint_core.errors import ConfigDocumentError, DotlintError
from dotlint_core.models.issues import Issue, ValidationResult
from dotlint_core.repo.git import GitRepository
from dotlint_rules.checker import Validator, default_rules
from dotlint_rules.rules.base import BaseRule


class StubRule(BaseRule):
    CODE = "TEST"
    NAME = "stub"

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = 0

    def evaluate(self, config, repo):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


class RecordingReporter:
    def __init__(self):
        self.results = []
        self.summaries = []

    def print_result(self, result):
        self.results.append(result)

    def print_summary(self, summary, fix_mode):
        self.summaries.append((summary, fix_mode))


def _result(*issues, passed=None):
    return ValidationResult(
        rule_name="r", passed=not issues if passed is None else passed, issues=tuple(issues)
    )


@pytest.fixture
def healthy_repo(dotfiles, fake_repo):
    """Dotter config referencing one tracked file, plus valid TOML/JSON."""
    dotfiles.dotter('[default.files]\n"a.txt" = "~/a.txt"\n')
    fake_repo.tracked.extend(
        [
            ".dotter/global.toml",
            dotfiles.write("a.txt", "a"),
            dotfiles.write("cfg.json", "{}"),
        ]
    )
    return fake_repo


class TestRunRules:
    def test_default_rule_order(self):
        assert [r.CODE for r in default_rules()] == ["DOT001", "DOT002", "DOT003", "DOT004", "DOT005"]

    def test_one_result_per_rule_in_order(self, config, healthy_repo):
        results = Validator(config, repo=healthy_repo).run_rules()

        assert [r.rule_name for r in results] == [
            "Dotter configuration files exist",
            "Dotter files exist and are tracked",
            "No broken symlinks",
            "All 1 TOML files are valid",
            "All 1 JSON files are valid",
        ]
        assert all(r.passed for r in results)

    def test_fatal_error_aborts_remaining_rules(self, config, fake_repo):
        first = StubRule(result=_result())
        failing = StubRule(error=ConfigDocumentError("bad document"))
        last = StubRule(result=_result())

        with pytest.raises(DotlintError, match="bad document"):
            Validator(config, repo=fake_repo, rules=[first, failing, last]).run_rules()

        assert (first.calls, failing.calls, last.calls) == (1, 1, 0)

    def test_malformed_dotter_document_aborts_run(self, config, fake_repo, dotfiles):
        dotfiles.dotter("[default.files\n")

        with pytest.raises(ConfigDocumentError):
            Validator(config, repo=fake_repo).run_rules()

    def test_repeated_runs_are_identical(self, config, fake_repo, dotfiles):
        dotfiles.dotter('[default.files]\n"b.txt" = "~/b"\n"c.txt" = "~/c"\n"z.txt" = "~/z"\n')
        dotfiles.write("b.txt")
        dotfiles.write("c.txt")
        fake_repo.ignored.add("b.txt")
        fake_repo.tracked.append(dotfiles.write("d.json", "{nope"))
        validator = Validator(config, repo=fake_repo)

        assert validator.run_rules() == validator.run_rules()

    def test_spy_traces_each_rule_evaluation(self, config, healthy_repo, monkeypatch, caplog):
        monkeypatch.setenv("DOTLINT_SPY", "1")

        with caplog.at_level("DEBUG", logger="dotlint"):
            Validator(config, repo=healthy_repo).run_rules()

        for qualname in (
            "DotterConfigExistsRule.evaluate",
            "DotterFilesTrackedRule.evaluate",
            "NoBrokenSymlinksRule.evaluate",
            "StructuredDataRule.evaluate",
        ):
            assert f"Entering {qualname}" in caplog.text
            assert f"Exiting {qualname}" in caplog.text

    def test_defaults_to_git_repository(self, tmp_path):
        validator = Validator(Config(dotfiles_dir=tmp_path))
        assert isinstance(validator.repo, GitRepository)
        assert validator.repo.root == tmp_path


class TestSummarize:
    def test_counts_and_exit_code_for_errors(self, config, fake_repo):
        results = [
            _result(Issue.error("e").with_file("b.txt").with_fix("Add to .gitignore: !b.txt")),
            _result(Issue.warning("w").with_file("c.txt").with_fix("Run: git add c.txt"), passed=True),
            _result(),
        ]

        summary = Validator(config, repo=fake_repo).summarize(results)

        assert (summary.total_issues, summary.errors, summary.warnings) == (2, 1, 1)
        assert summary.exit_code == 1
        assert summary.ignored_files == ("b.txt",)
        assert summary.untracked_files == ("c.txt",)

    def test_warnings_alone_exit_zero(self, config, fake_repo):
        results = [_result(Issue.warning("w1"), Issue.warning("w2"), passed=True)]

        summary = Validator(config, repo=fake_repo).summarize(results)

        assert summary.exit_code == 0
        assert summary.warnings == 2
        assert not summary.failed

    def test_clean_run(self, config, fake_repo):
        summary = Validator(config, repo=fake_repo).summarize([_result(), _result()])
        assert (summary.total_issues, summary.exit_code) == (0, 0)

    def test_fix_groups_ignore_issues_without_file(self, config, fake_repo):
        results = [_result(Issue.error("e").with_fix("Add to .gitignore: !x"), Issue.error("plain").with_file("y"))]

        summary = Validator(config, repo=fake_repo).summarize(results)

        assert summary.ignored_files == ()
        assert summary.untracked_files == ()

    def test_untracked_files_keep_discovery_order(self, config, fake_repo):
        results = [
            _result(*(Issue.warning(f).with_file(f).with_fix(f"Run: git add {f}") for f in ("z", "a", "m")), passed=True)
        ]

        summary = Validator(config, repo=fake_repo).summarize(results)

        assert summary.untracked_files == ("z", "a", "m")


class TestScenarios:
    def test_missing_primary_config_fails_run(self, config, fake_repo):
        summary = Validator(config, repo=fake_repo).summarize(Validator(config, repo=fake_repo).run_rules())

        assert summary.exit_code == 1
        assert summary.errors == 1

    def test_ignored_reference_fails_run(self, config, healthy_repo, dotfiles):
        dotfiles.dotter('[default.files]\n"a.txt" = "~/a.txt"\n"b.txt" = "~/b.txt"\n')
        dotfiles.write("b.txt", "b")
        healthy_repo.ignored.add("b.txt")
        validator = Validator(config, repo=healthy_repo)

        summary = validator.summarize(validator.run_rules())

        assert summary.exit_code == 1
        assert summary.ignored_files == ("b.txt",)

    def test_untracked_reference_only_warns(self, config, healthy_repo, dotfiles):
        dotfiles.dotter('[default.files]\n"a.txt" = "~/a.txt"\n"c.txt" = "~/c.txt"\n')
        dotfiles.write("c.txt", "c")
        validator = Validator(config, repo=healthy_repo)

        results = validator.run_rules()
        summary = validator.summarize(results)

        assert all(r.passed for r in results)
        assert (summary.errors, summary.warnings, summary.exit_code) == (0, 1, 0)

    def test_invalid_json_fails_run(self, config, healthy_repo, dotfiles):
        healthy_repo.tracked.append(dotfiles.write("d.json", "{oops"))
        validator = Validator(config, repo=healthy_repo)

        results = validator.run_rules()

        json_result = results[-1]
        assert [i.file for i in json_result.issues] == ["d.json"]
        assert validator.summarize(results).exit_code == 1


class TestValidate:
    def test_renders_each_result_then_summary(self, tmp_path, healthy_repo):
        config = Config(dotfiles_dir=tmp_path, fix_mode=True)
        reporter = RecordingReporter()

        exit_code = Validator(config, repo=healthy_repo).validate(reporter)

        assert exit_code == 0
        assert len(reporter.results) == 5
        ((summary, fix_mode),) = reporter.summaries
        assert summary.total_issues == 0
        assert fix_mode is True

    def test_fatal_error_renders_nothing(self, config, fake_repo):
        reporter = RecordingReporter()
        rules = [StubRule(result=_result()), StubRule(error=DotlintError("boom"))]

        with pytest.raises(DotlintError):
            Validator(config, repo=fake_repo, rules=rules).validate(reporter)

        assert reporter.results == []
        assert reporter.summaries == []
