from __future__ import annotations

import pytest
from pydantic import ValidationError

from create_app.config import DEFAULT_REPOSITORY, ScaffoldSettings
from create_app.errors import ConfigurationError
from create_app.schema import InvocationRequest, Template


def test_defaults():
    settings = ScaffoldSettings()
    assert settings.repository == DEFAULT_REPOSITORY
    assert settings.manifest_name == "package.json"
    assert settings.default_version == "1.0.0"
    assert settings.package_managers == ("yarn", "npm")
    assert settings.fetch_mode == "clone"


def test_reserved_names_are_sorted():
    settings = ScaffoldSettings(reserved_names=("react-scripts", "react", "react-dom"))
    assert settings.reserved_names == ("react", "react-dom", "react-scripts")


@pytest.mark.parametrize(
    "value, template, branch",
    [
        (None, Template.REACT, "master"),
        ("react", Template.REACT, "master"),
        ("node", Template.NODE, "node"),
        ("vue", Template.REACT, "master"),
        ("NODE", Template.REACT, "master"),
    ],
)
def test_template_resolution_and_branch(value, template, branch):
    resolved = Template.resolve(value)
    assert resolved is template
    assert ScaffoldSettings().branch_for(resolved) == branch


def test_from_env_applies_overrides():
    settings = ScaffoldSettings.from_env(
        {
            "CREATE_APP_REPOSITORY": "https://example.com/acme/templates/",
            "CREATE_APP_FETCH_MODE": "Archive",
        }
    )
    assert settings.repository == "https://example.com/acme/templates"
    assert settings.fetch_mode == "archive"


def test_from_env_ignores_blank_values():
    settings = ScaffoldSettings.from_env({"CREATE_APP_REPOSITORY": "  ", "CREATE_APP_FETCH_MODE": ""})
    assert settings == ScaffoldSettings()


def test_from_env_rejects_unknown_fetch_mode():
    with pytest.raises(ConfigurationError) as excinfo:
        ScaffoldSettings.from_env({"CREATE_APP_FETCH_MODE": "rsync"})
    assert "rsync" in excinfo.value.message


def test_request_paths(tmp_path):
    request = InvocationRequest(project_name="apps/demo")
    assert request.template is Template.REACT
    assert request.target_path(tmp_path) == tmp_path / "apps" / "demo"
    assert request.app_name(tmp_path) == "demo"


def test_request_is_immutable():
    request = InvocationRequest(project_name="demo", template="node")
    assert request.template is Template.NODE
    with pytest.raises(ValidationError):
        request.project_name = "other"


def test_request_path_normalises_parent_segments(tmp_path):
    request = InvocationRequest(project_name="apps/../demo")
    assert request.target_path(tmp_path) == tmp_path / "demo"


def test_request_path_does_not_follow_symlinks(tmp_path):
    (tmp_path / "foo").symlink_to(tmp_path / "elsewhere")
    request = InvocationRequest(project_name="foo")
    assert request.target_path(tmp_path) == tmp_path / "foo"
    assert request.app_name(tmp_path) == "foo"
