# test_standup_writer.py
import json
import os
import tempfile
import unittest

from jinja2 import PackageLoader

import config_manager
import standup_templates
import standup_writer
from config import GlobalConfig
from models import STANDUP_SECTIONS, StandupData


EXPECTED_FULL = """# Standup - 2024-03-05

**Yesterday (1. What did you do yesterday?):**
- A
- B

---

**Today (2. What did you do today?):**
- (No data)

---

**Tomorrow (3. What will you do tomorrow?):**
- (No data)

---

**Blockers (4. Any blockers stopping you?):**
- (No data)

---

**Accelerators (5. What could accelerate your progress?):**
- (No data)
"""


class TestStandupFilename(unittest.TestCase):

    def test_hyphens_removed(self):
        self.assertEqual(
            standup_writer.standup_filename("2024-03-05"), "standup-20240305.md"
        )

    def test_other_dates(self):
        for date_str in ("1999-12-31", "2026-01-01", "2024-02-29"):
            self.assertEqual(
                standup_writer.standup_filename(date_str),
                "standup-" + date_str.replace("-", "") + ".md",
            )


class TestRenderStandup(unittest.TestCase):

    def test_exact_template(self):
        content = standup_writer.render_standup("2024-03-05", {"yesterday": ["A", "B"]})
        self.assertEqual(content, EXPECTED_FULL)

    def test_empty_data_every_section_no_data(self):
        content = standup_writer.render_standup("2024-03-05", {})
        bullets = [line for line in content.splitlines() if line.startswith("- ")]
        self.assertEqual(bullets, ["- (No data)"] * len(STANDUP_SECTIONS))

    def test_none_data_same_as_empty(self):
        self.assertEqual(
            standup_writer.render_standup("2024-03-05", None),
            standup_writer.render_standup("2024-03-05", {}),
        )

    def test_bullets_keep_order_without_blank_lines(self):
        content = standup_writer.render_standup("2024-03-05", {"blockers": ["A", "B"]})
        self.assertIn("**Blockers (4. Any blockers stopping you?):**\n- A\n- B\n\n---", content)

    def test_accepts_standup_data_instance(self):
        data = StandupData(today=["Ship it"])
        content = standup_writer.render_standup("2024-03-05", data)
        self.assertIn("**Today (2. What did you do today?):**\n- Ship it\n", content)

    def test_markdown_is_not_escaped(self):
        content = standup_writer.render_standup("2024-03-05", {"today": ["Review PR #346 <b>"]})
        self.assertIn("- Review PR #346 <b>", content)

    def test_invalid_section_type(self):
        with self.assertRaises(ValueError):
            standup_writer.render_standup("2024-03-05", {"today": 42})

    def test_template_loaded_from_installed_package(self):
        env = standup_writer._get_environment(GlobalConfig())
        self.assertIsInstance(env.loader, PackageLoader)
        self.assertIn(GlobalConfig.STANDUP_TEMPLATE_NAME, env.loader.list_templates())
        package_dir = os.path.dirname(os.path.abspath(standup_templates.__file__))
        self.assertTrue(
            os.path.isfile(os.path.join(package_dir, GlobalConfig.STANDUP_TEMPLATE_NAME))
        )

    def test_render_does_not_depend_on_script_directory(self):
        # 安装后脚本目录 (site-packages) 下没有 templates/ 目录
        config = GlobalConfig()
        with tempfile.TemporaryDirectory() as tmp:
            config.SCRIPT_BASE_PATH = tmp
            content = standup_writer.render_standup(
                "2024-03-05", {"yesterday": ["A", "B"]}, config
            )
        self.assertEqual(content, EXPECTED_FULL)


class TestSaveStandupFile(unittest.TestCase):

    def test_write_and_overwrite(self):
        with tempfile.TemporaryDirectory() as tmp:
            name = standup_writer.save_standup_file("2024-03-05", "first", directory=tmp)
            self.assertEqual(name, "standup-20240305.md")
            standup_writer.save_standup_file("2024-03-05", "second", directory=tmp)
            with open(os.path.join(tmp, name), encoding="utf-8") as f:
                self.assertEqual(f.read(), "second")
            self.assertEqual(os.listdir(tmp), [name])

    def test_unwritable_directory_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "does", "not", "exist")
            with self.assertRaises(OSError):
                standup_writer.save_standup_file("2024-03-05", "x", directory=missing)


class TestStandupDataLoading(unittest.TestCase):

    def setUp(self):
        self.config = GlobalConfig()
        self.config.STANDUP_DATA_FILE = ""

    def test_load_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "standup.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"today": ["Write tests"]}, f)
            self.assertEqual(
                config_manager.resolve_standup_data(path, self.config),
                {"today": ["Write tests"]},
            )

    def test_missing_file_gives_empty_mapping(self):
        with self.assertLogs("config_manager", level="ERROR"):
            data = config_manager.load_standup_data("/nonexistent/standup.json")
        self.assertEqual(data, {})

    def test_invalid_json_gives_empty_mapping(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "broken.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{not json")
            with self.assertLogs("config_manager", level="ERROR"):
                self.assertEqual(config_manager.load_standup_data(path), {})

    def test_non_object_gives_empty_mapping(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "list.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump(["a"], f)
            with self.assertLogs("config_manager", level="ERROR"):
                self.assertEqual(config_manager.load_standup_data(path), {})

    def test_example_data_when_nothing_configured(self):
        data = config_manager.resolve_standup_data(None, self.config)
        self.assertEqual(data, GlobalConfig.EXAMPLE_STANDUP_DATA)

    def test_env_file_used_when_no_argument(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "env.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"blockers": "None"}, f)
            self.config.STANDUP_DATA_FILE = path
            data = config_manager.resolve_standup_data(None, self.config)
        self.assertEqual(StandupData.from_mapping(data).blockers, ["None"])


if __name__ == "__main__":
    unittest.main()
