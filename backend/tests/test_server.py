import importlib.util
import os
import unittest
from pathlib import Path
from unittest.mock import patch

APP_PATH = Path(__file__).resolve().parents[1] / "server" / "app.py"


def _load_app():
    module_spec = importlib.util.spec_from_file_location("alignmate_server", APP_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module.app


@patch.dict(os.environ, {}, clear=True)
class TestAlignEndpoint(unittest.TestCase):

    def setUp(self):
        self.client = _load_app().test_client()

    def test_align(self):
        response = self.client.post(
            "/align", json={"code": "int a = 1;\nstring bb = 2;\nlong ccc = 3;\n"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "text/plain")
        self.assertEqual(
            response.get_data(as_text=True),
            "int    a   = 1;\nstring bb  = 2;\nlong   ccc = 3;\n",
        )

    def test_disable_pass(self):
        response = self.client.post(
            "/align",
            json={"code": "x = 1;\nyy = 2;\n", "do_align_assignments": False},
        )
        self.assertEqual(response.get_data(as_text=True), "x = 1;\nyy = 2;\n")

    def test_invalid_settings(self):
        response = self.client.post(
            "/align", json={"code": "x = 1;", "do_align_assignments": "maybe"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())

    def test_code_must_be_a_string(self):
        response = self.client.post("/align", json={"code": 42})
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
