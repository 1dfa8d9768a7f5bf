"""
Tests for the SQLAlchemy repositories against in-memory SQLite.
"""

import unittest
from datetime import datetime, timedelta, timezone

import pytest

from core.access.catalog import RECRUITER_ROLE_ID, SUPER_ROLE_ID
from core.access.models import ModuleId, PermissionAction
from core.config_loader import RankingConfig
from core.exceptions import JobNotFoundException
from core.ranking.service import RankingService
from database.models import Role as RoleRow
from database.repository import PlatformRepository
from tests import make_application, make_job, make_test_session_factory


@pytest.mark.db
class TestAccessRepositories(unittest.TestCase):

    def setUp(self):
        self.db = make_test_session_factory()()
        self.repo = PlatformRepository(self.db)

    def tearDown(self):
        self.db.rollback()
        self.db.close()

    def test_seeded_records(self):
        self.assertEqual({r.id for r in self.repo.list_roles()}, {SUPER_ROLE_ID, RECRUITER_ROLE_ID})
        self.assertEqual([b.id for b in self.repo.list_branches()], ["main-hub"])
        self.assertEqual(len(self.repo.list_users()), 1)

    def test_role_permissions_survive_storage(self):
        role = self.repo.get_role(RECRUITER_ROLE_ID)
        self.assertTrue(role.is_system)
        self.assertEqual(
            role.actions_for(ModuleId.INTELLIGENCE),
            frozenset({PermissionAction.VIEW, PermissionAction.EXECUTE}),
        )

    def test_corrupt_stored_role_is_skipped(self):
        self.db.add(RoleRow(
            id="role-corrupt", name="Corrupt", description="",
            permissions=[{"moduleId": "PAYROLL", "actions": ["VIEW"]}], is_system=False,
        ))
        self.db.flush()

        self.assertIsNone(self.repo.get_role("role-corrupt"))
        self.assertNotIn("role-corrupt", [r.id for r in self.repo.list_roles()])

    def test_user_email_lookup_is_case_insensitive(self):
        self.assertIsNotNone(self.repo.get_user_by_email("ADMIN@protocol.ai"))
        self.assertIsNone(self.repo.get_user_by_email("nobody@protocol.ai"))

    def test_delete_missing_returns_false(self):
        self.assertFalse(self.repo.delete_role("role-missing"))
        self.assertFalse(self.repo.delete_user("admin-missing"))


@pytest.mark.db
class TestRecruitmentRepositories(unittest.TestCase):

    def setUp(self):
        self.db = make_test_session_factory()()
        self.repo = PlatformRepository(self.db)
        self.repo.save_job(make_job("job-1", threshold=70, salary_budget=2500))
        self.repo.save_job(make_job("job-2", branch_id="north"))
        self.repo.save_job(make_job("job-old", archived=True))

    def tearDown(self):
        self.db.rollback()
        self.db.close()

    def test_job_fields_roundtrip(self):
        job = self.repo.get_job("job-1")
        self.assertEqual(job.salary_budget, 2500)
        self.assertEqual(job.matching_rules.threshold, 70)
        self.assertEqual(job.required_skills, ["python", "sql"])

    def test_list_jobs_filters(self):
        self.assertEqual({j.id for j in self.repo.list_jobs()}, {"job-1", "job-2"})
        self.assertEqual([j.id for j in self.repo.list_jobs(branch_id="north")], ["job-2"])
        self.assertIn("job-old", {j.id for j in self.repo.list_jobs(include_archived=True)})

    def test_applications_in_submission_order(self):
        base = datetime(2025, 1, 1, tzinfo=timezone.utc)
        for i, app_id in enumerate(["c", "a", "b"]):
            app = make_application(app_id)
            app.applied_at = base + timedelta(minutes=i)
            self.repo.save_application(app)

        self.assertEqual([a.id for a in self.repo.list_applications(job_id="job-1")], ["c", "a", "b"])

    def test_resave_bumps_version(self):
        app = self.repo.save_application(make_application("a1"))
        self.assertEqual(app.version, 1)
        app.status = "SHORTLISTED"
        self.repo.save_application(app)

        stored = self.repo.get_application("a1")
        self.assertEqual(stored.version, 2)
        self.assertEqual(stored.status, "SHORTLISTED")
        self.assertEqual(stored.candidate_info.expected_salary, "2000")

    def test_ranking_service_over_repository(self):
        self.repo.save_application(make_application("low", match_score=50))
        self.repo.save_application(make_application("high", match_score=90))
        self.repo.save_application(make_application("gone", match_score=99, archived=True))

        ranked = RankingService(self.repo, RankingConfig()).rank_job("job-1")
        self.assertEqual([c.id for c in ranked], ["high", "low"])

    def test_ranking_unknown_job(self):
        with self.assertRaises(JobNotFoundException):
            RankingService(self.repo).rank_job("job-missing")


if __name__ == '__main__':
    unittest.main()
