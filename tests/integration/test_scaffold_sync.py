"""
Integration tests for scaffold sync - full runs against a temporary project.
"""

import json
from pathlib import Path

import pytest

from webcv.contexts.scaffolding.exceptions import ScaffoldConfigurationError
from webcv.contexts.scaffolding.managed_files import MANAGED_FILES, SHIPPED_PATH, ManagedFile
from webcv.contexts.scaffolding.orchestrator import sync_scaffold
from webcv.contexts.scaffolding.reconciler import ScaffoldAction
from webcv.contexts.scaffolding.resolver import ScriptedConfirm
from webcv.contexts.scaffolding.sync_state import load_sync_state, save_sync_state, state_file_path
from webcv.utils.fingerprint import fingerprint

RESUME = ManagedFile("resume", "resume.yaml", "resume.yaml")
CONFIG = ManagedFile("config", "config.yaml", "config.yaml")
WORKFLOW = ManagedFile("workflow", "deploy.yml", ".github/workflows/deploy.yml")


@pytest.fixture
def shipped_dir(tmp_path) -> Path:
    shipped = tmp_path / "shipped"
    shipped.mkdir()
    (shipped / "resume.yaml").write_bytes(b"basics:\n  name: Jane\n")
    (shipped / "config.yaml").write_bytes(b"theme: modern\n")
    (shipped / "deploy.yml").write_bytes(b"name: Deploy\n")
    return shipped


@pytest.fixture
def project_dir(tmp_path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


def run(project_dir, shipped_dir, answers=(), managed_files=(RESUME, CONFIG, WORKFLOW)):
    confirm = ScriptedConfirm(answers)
    result = sync_scaffold(
        project_dir, managed_files=managed_files, confirm=confirm, shipped_dir=shipped_dir
    )
    return result, confirm


@pytest.mark.integration
def test_shipped_scaffold_is_complete():
    """Every managed file has a shipped template in the package."""
    for managed_file in MANAGED_FILES:
        assert managed_file.source_path(SHIPPED_PATH).is_file(), managed_file.file_id


@pytest.mark.integration
def test_fresh_project_with_real_scaffold(project_dir):
    """First init creates every managed file from the bundled templates."""
    result = sync_scaffold(project_dir, confirm=ScriptedConfirm())

    assert result.created_or_updated == len(MANAGED_FILES)
    assert [o.file_id for o in result.outcomes] == [m.file_id for m in MANAGED_FILES]
    for managed_file in MANAGED_FILES:
        destination = project_dir / managed_file.destination
        assert destination.read_bytes() == managed_file.source_path().read_bytes()


@pytest.mark.integration
def test_scenario_a_absent_file_is_created(project_dir, shipped_dir):
    """No state, no destination: file is created and its shipped fingerprint recorded."""
    result, confirm = run(project_dir, shipped_dir, managed_files=(CONFIG,))

    assert result.created_or_updated == 1
    assert result.outcomes[0].action is ScaffoldAction.CREATE
    assert (project_dir / "config.yaml").read_bytes() == b"theme: modern\n"
    assert load_sync_state(state_file_path(project_dir)) == {
        "config": fingerprint(shipped_dir / "config.yaml")
    }
    assert confirm.call_count == 0


@pytest.mark.integration
def test_scenario_b_local_edit_of_unchanged_template(project_dir, shipped_dir):
    """Template unchanged since last sync: the user's edit is kept, nobody is asked."""
    shipped_fp = fingerprint(shipped_dir / "config.yaml")
    save_sync_state(state_file_path(project_dir), {"config": shipped_fp})
    (project_dir / "config.yaml").write_bytes(b"theme: classic\n")

    result, confirm = run(project_dir, shipped_dir, answers=["yes"], managed_files=(CONFIG,))

    assert confirm.call_count == 0
    assert result.outcomes[0].action is ScaffoldAction.SKIP_LOCAL_MOD
    assert result.created_or_updated == 0
    assert (project_dir / "config.yaml").read_bytes() == b"theme: classic\n"
    assert load_sync_state(state_file_path(project_dir)) == {"config": shipped_fp}


@pytest.mark.integration
def test_scenario_c_changed_template_accepted(project_dir, shipped_dir):
    """Template changed under a local edit: on 'yes' the edit is backed up and replaced."""
    (project_dir / "config.yaml").write_bytes(b"theme: classic\n")  # Y
    old_template = project_dir.parent / "old_config.yaml"
    old_template.write_bytes(b"theme: modern\nold: true\n")  # X
    save_sync_state(state_file_path(project_dir), {"config": fingerprint(old_template)})

    result, confirm = run(project_dir, shipped_dir, answers=["yes"], managed_files=(CONFIG,))

    assert confirm.call_count == 1
    assert result.created_or_updated == 1
    assert (project_dir / "config.yaml.bak").read_bytes() == b"theme: classic\n"
    assert (project_dir / "config.yaml").read_bytes() == b"theme: modern\n"
    assert load_sync_state(state_file_path(project_dir)) == {
        "config": fingerprint(shipped_dir / "config.yaml")
    }


@pytest.mark.integration
def test_declined_update_is_not_asked_again(project_dir, shipped_dir):
    """Once declined, the same template version doesn't prompt on the next run."""
    (project_dir / "config.yaml").write_bytes(b"theme: classic\n")
    save_sync_state(state_file_path(project_dir), {"config": "sha256:older-template"})

    first, first_confirm = run(project_dir, shipped_dir, answers=["n"], managed_files=(CONFIG,))
    second, second_confirm = run(project_dir, shipped_dir, answers=["y"], managed_files=(CONFIG,))

    assert first_confirm.call_count == 1
    assert first.outcomes[0].changed is False
    assert second_confirm.call_count == 0
    assert second.outcomes[0].action is ScaffoldAction.SKIP_LOCAL_MOD
    assert (project_dir / "config.yaml").read_bytes() == b"theme: classic\n"
    assert not (project_dir / "config.yaml.bak").exists()


@pytest.mark.integration
def test_later_template_change_prompts_again(project_dir, shipped_dir):
    """A further template change after a declined update is offered again."""
    (project_dir / "config.yaml").write_bytes(b"theme: classic\n")
    save_sync_state(state_file_path(project_dir), {"config": "sha256:older-template"})
    run(project_dir, shipped_dir, answers=["n"], managed_files=(CONFIG,))

    (shipped_dir / "config.yaml").write_bytes(b"theme: modern\nnew_option: 1\n")
    result, confirm = run(project_dir, shipped_dir, answers=["y"], managed_files=(CONFIG,))

    assert confirm.call_count == 1
    assert result.outcomes[0].changed is True
    assert (project_dir / "config.yaml").read_bytes() == b"theme: modern\nnew_option: 1\n"


@pytest.mark.integration
def test_user_already_on_new_template(project_dir, shipped_dir):
    """Destination equals the new template: skipped even though the template changed."""
    (project_dir / "config.yaml").write_bytes(b"theme: modern\n")
    save_sync_state(state_file_path(project_dir), {"config": "sha256:older-template"})

    result, confirm = run(project_dir, shipped_dir, managed_files=(CONFIG,))

    assert result.outcomes[0].action is ScaffoldAction.SKIP_CURRENT
    assert confirm.call_count == 0
    assert result.state["config"] == fingerprint(shipped_dir / "config.yaml")


@pytest.mark.integration
def test_state_records_current_shipped_for_every_file(project_dir, shipped_dir):
    """After a mixed run, each processed file maps to its current shipped fingerprint."""
    (project_dir / "resume.yaml").write_bytes(b"basics:\n  name: Me\n")  # prompt, declined
    (project_dir / "config.yaml").write_bytes(b"theme: modern\n")  # current
    # workflow absent -> created

    result, confirm = run(project_dir, shipped_dir, answers=["no"])

    assert [o.action for o in result.outcomes] == [
        ScaffoldAction.PROMPT_UPDATE,
        ScaffoldAction.SKIP_CURRENT,
        ScaffoldAction.CREATE,
    ]
    assert confirm.call_count == 1
    assert result.created_or_updated == 1
    assert load_sync_state(state_file_path(project_dir)) == {
        "resume": fingerprint(shipped_dir / "resume.yaml"),
        "config": fingerprint(shipped_dir / "config.yaml"),
        "workflow": fingerprint(shipped_dir / "deploy.yml"),
    }


@pytest.mark.integration
def test_prompts_follow_declaration_order(project_dir, shipped_dir):
    (project_dir / "resume.yaml").write_bytes(b"mine\n")
    (project_dir / "config.yaml").write_bytes(b"mine\n")

    _, confirm = run(project_dir, shipped_dir, answers=["n", "n"])

    assert confirm.call_count == 2
    assert "resume.yaml" in confirm.prompts[0]
    assert "config.yaml" in confirm.prompts[1]


@pytest.mark.integration
def test_corrupt_state_treated_as_first_run(project_dir, shipped_dir):
    state_path = state_file_path(project_dir)
    state_path.parent.mkdir(parents=True)
    state_path.write_text("{oops", encoding="utf-8")
    (project_dir / "config.yaml").write_bytes(b"theme: classic\n")

    result, confirm = run(project_dir, shipped_dir, answers=[""], managed_files=(CONFIG,))

    # No baseline, so a differing file is offered rather than silently kept
    assert result.outcomes[0].action is ScaffoldAction.PROMPT_UPDATE
    assert confirm.call_count == 1
    assert json.loads(state_path.read_text(encoding="utf-8")) == {
        "config": fingerprint(shipped_dir / "config.yaml")
    }


@pytest.mark.integration
def test_unrelated_state_entries_are_kept(project_dir, shipped_dir):
    save_sync_state(state_file_path(project_dir), {"retired": "sha256:zzz"})

    result, _ = run(project_dir, shipped_dir, managed_files=(CONFIG,))

    assert result.state["retired"] == "sha256:zzz"
    assert "config" in result.state


@pytest.mark.integration
def test_file_error_skips_file_and_continues(project_dir, shipped_dir):
    """An unreadable destination is reported; later files are still processed."""
    (project_dir / "resume.yaml").mkdir()  # can't be read as a file
    save_sync_state(state_file_path(project_dir), {"resume": "sha256:previous"})

    result, _ = run(project_dir, shipped_dir)

    assert result.success is False
    assert [o.file_id for o in result.errors] == ["resume"]
    assert result.outcomes[0].error
    assert result.outcomes[1].action is ScaffoldAction.CREATE
    assert result.outcomes[2].action is ScaffoldAction.CREATE
    assert result.created_or_updated == 2

    state = load_sync_state(state_file_path(project_dir))
    assert "resume" not in state
    assert set(state) == {"config", "workflow"}


@pytest.mark.integration
def test_failed_backup_reported_per_file(project_dir, shipped_dir, monkeypatch):
    (project_dir / "resume.yaml").write_bytes(b"mine\n")

    def no_backup(*args, **kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr("webcv.contexts.scaffolding.reconciler.shutil.copy2", no_backup)

    result, _ = run(project_dir, shipped_dir, answers=["yes"])

    assert result.outcomes[0].error
    assert "read-only" in result.outcomes[0].error
    assert (project_dir / "resume.yaml").read_bytes() == b"mine\n"
    assert result.outcomes[1].action is ScaffoldAction.CREATE
    assert "resume" not in result.state


@pytest.mark.integration
def test_missing_shipped_template_aborts_without_state(project_dir, shipped_dir):
    (shipped_dir / "config.yaml").unlink()

    with pytest.raises(ScaffoldConfigurationError):
        run(project_dir, shipped_dir)

    # Earlier files stay written; no state is persisted for the aborted run
    assert (project_dir / "resume.yaml").exists()
    assert not (project_dir / ".github").exists()
    assert not state_file_path(project_dir).exists()


@pytest.mark.integration
def test_rerun_is_idempotent(project_dir, shipped_dir):
    run(project_dir, shipped_dir)
    result, confirm = run(project_dir, shipped_dir, answers=["y", "y", "y"])

    assert result.created_or_updated == 0
    assert confirm.call_count == 0
    assert all(o.action is ScaffoldAction.SKIP_CURRENT for o in result.outcomes)


@pytest.mark.integration
def test_unwritable_state_is_reported(project_dir, shipped_dir):
    """A state file that can't be written fails the run without raising."""
    (project_dir / ".webcv").write_text("not a directory", encoding="utf-8")

    result, _ = run(project_dir, shipped_dir)

    assert result.success is False
    assert result.errors == []
    assert "Cannot write sync state" in result.state_error
    assert result.state == {}
    assert result.created_or_updated == 3
    assert (project_dir / "config.yaml").read_bytes() == b"theme: modern\n"
