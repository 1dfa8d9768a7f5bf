"""
End-to-end test of the command line: init-db, import, rank, serve.
"""

import io
import json
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import pytest
import yaml

import main as cli
from web.backend.config import CONFIG_PATH_ENV, get_config


@pytest.mark.db
class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.tmpdir, "config.yaml")
        with open(self.config_path, "w") as f:
            yaml.dump({"database": {"url": f"sqlite:///{self.tmpdir}/cli.db"}}, f)

        self.export_path = os.path.join(self.tmpdir, "export.json")
        with open(self.export_path, "w") as f:
            json.dump({
                "jobs": [{
                    "id": "job-1",
                    "title": "Data Engineer",
                    "branchId": "main-hub",
                    "minYearsExperience": 2,
                    "matchingRules": {"threshold": 0},
                }],
                "applications": [
                    {
                        "id": "app-1",
                        "jobId": "job-1",
                        "candidateInfo": {"fullName": "Jane Doe", "expectedSalary": "3000", "noticePeriod": "Immediate"},
                        "extractedData": {"experienceYears": 4},
                        "matchScore": 80,
                    },
                    {
                        "id": "app-2",
                        "jobId": "job-1",
                        "candidateInfo": {"fullName": "John Roe", "expectedSalary": "1500", "noticePeriod": "2 weeks"},
                        "extractedData": {"experienceYears": 1},
                        "matchScore": 55,
                        "archived": True,
                    },
                ],
            }, f)

        self.env = patch.dict(os.environ, {}, clear=True)
        self.env.start()

    def tearDown(self):
        self.env.stop()
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def run_cli(self, *argv) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(["--config", self.config_path, *argv])
        self.assertEqual(code, 0)
        return out.getvalue()

    def test_init_import_rank(self):
        self.run_cli("init-db")
        self.run_cli("import", self.export_path)

        rows = json.loads(self.run_cli("rank", "job-1", "--json"))
        self.assertEqual([r["id"] for r in rows], ["app-1"])
        self.assertEqual(rows[0]["intelligenceScore"], 84)

        table = self.run_cli("rank", "job-1", "--skills", "100", "--salary", "0",
                             "--experience", "0", "--availability", "0")
        self.assertIn("Jane Doe", table)
        self.assertIn("score=  80", table)

    def test_serve_uses_config_file(self):
        self.addCleanup(get_config.cache_clear)
        with patch("web.backend.app.main") as serve:
            self.run_cli("serve")

        serve.assert_called_once_with()
        self.assertEqual(os.environ[CONFIG_PATH_ENV], os.path.abspath(self.config_path))
        self.assertEqual(get_config().database.url, f"sqlite:///{self.tmpdir}/cli.db")

    def test_job_from_json_defaults(self):
        job = cli.job_from_json({"id": "j"})
        self.assertEqual(job.status, "OPEN")
        self.assertEqual(job.matching_rules.threshold, 60)
        self.assertIsNone(job.salary_budget)


if __name__ == '__main__':
    unittest.main()
