"""Tests for interactive input collection (step 1)."""

from __future__ import annotations

import json

import pytest

from sitegen.collector import collect_user_input, validate_project_name, validate_resources
from sitegen.config import ProjectConfig

pytestmark = pytest.mark.unit

BASIC = "11ty with static content (Home, About, Services, Contacts)"
MULTILANG = "11ty with static content + multilanguage support"
CMS = "11ty + Decap CMS with static and dynamic content"
FULL = "11ty + Decap CMS with static and dynamic content + multilanguage"


class TestValidateProjectName:
    def test_accepts_new_name(self, work_dir):
        assert validate_project_name("fresh-site", work_dir) is True

    def test_rejects_empty(self, work_dir):
        assert validate_project_name("   ", work_dir) == "Project name is required"

    def test_rejects_existing_directory(self, work_dir):
        (work_dir / "taken").mkdir()
        assert (
            validate_project_name("taken", work_dir)
            == "Directory already exists. Please choose another name."
        )

    def test_validate_resources(self):
        assert validate_resources(["Services"]) is True
        assert validate_resources([]) == "Select at least one dynamic resource"


class TestCollectUserInput:
    def test_basic_project(self, scripted_prompter, settings):
        prompter = scripted_prompter(name="My Site", project_type=BASIC)
        config = collect_user_input(prompter, settings)

        assert config.project_name == "My Site"
        assert config.project_type == ["basic"]
        assert config.languages is None
        assert config.dynamic_resources is None
        prompter.ask_multi_choice.assert_not_called()

    def test_saves_configuration(self, scripted_prompter, settings):
        config = collect_user_input(scripted_prompter(project_type=CMS, resources=["Services"]), settings)

        data = json.loads(settings.config_path.read_text(encoding="utf-8"))
        assert data == {
            "projectName": "My Site",
            "projectType": ["basic", "CMS"],
            "dynamicResources": ["Services"],
        }
        assert ProjectConfig.load(settings.config_path) == config

    def test_multilanguage_prepends_english(self, scripted_prompter, settings):
        prompter = scripted_prompter(project_type=MULTILANG, languages=["French", "German"])
        config = collect_user_input(prompter, settings)
        assert config.languages == ["English", "French", "German"]

    def test_multilanguage_default_is_spanish(self, scripted_prompter, settings):
        prompter = scripted_prompter(project_type=MULTILANG)
        config = collect_user_input(prompter, settings)
        assert config.languages == ["English", "Spanish"]

    def test_full_project_asks_both_follow_ups(self, scripted_prompter, settings):
        prompter = scripted_prompter(
            project_type=FULL, resources=["News/Blog", "Products"], languages=["Italian"]
        )
        config = collect_user_input(prompter, settings)

        assert config.is_cms and config.is_multilanguage
        assert config.dynamic_resources == ["News/Blog", "Products"]
        assert config.languages == ["English", "Italian"]
        assert prompter.ask_multi_choice.call_count == 2

    def test_resources_offered_from_catalog(self, scripted_prompter, settings):
        prompter = scripted_prompter(project_type=CMS, resources=["Services"])
        collect_user_input(prompter, settings)
        options = prompter.ask_multi_choice.call_args.args[1]
        assert options == ["Services", "News/Blog", "Properties", "Portfolio", "Products"]

    def test_empty_resources_rejected(self, scripted_prompter, settings, capsys):
        prompter = scripted_prompter(project_type=CMS, resources=[])
        with pytest.raises(ValueError, match="Select at least one dynamic resource"):
            collect_user_input(prompter, settings)
        assert "Error collecting user input" in capsys.readouterr().err
        assert not settings.config_path.exists()

    def test_existing_directory_rejected(self, scripted_prompter, settings, work_dir):
        (work_dir / "My Site").mkdir()
        with pytest.raises(ValueError, match="Directory already exists"):
            collect_user_input(scripted_prompter(), settings)
