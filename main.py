import json
import logging
import os
import sys
import argparse
from typing import Any, Dict, List

from core.app_context import AppContext
from core.config_loader import load_config
from core.ranking.dto import ApplicationDTO, CandidateInfo, ExtractedCVData, JobDTO
from core.ranking.models import RankingWeights
from database.database import make_engine
from database.init_db import init_db
from database.repositories.recruitment import matching_rules_from_json
from sqlalchemy.orm import sessionmaker

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def job_from_json(data: Dict[str, Any]) -> JobDTO:
    return JobDTO(
        id=data["id"],
        title=data.get("title", ""),
        branch_id=data.get("branchId", ""),
        department=data.get("department", ""),
        location=data.get("location", ""),
        status=data.get("status", "OPEN"),
        min_years_experience=float(data.get("minYearsExperience") or 0),
        required_skills=list(data.get("requiredSkills") or []),
        matching_rules=matching_rules_from_json(data.get("matchingRules")),
        salary_budget=data.get("salaryBudget"),
        archived=bool(data.get("archived", False)),
    )


def application_from_json(data: Dict[str, Any]) -> ApplicationDTO:
    info = data.get("candidateInfo") or {}
    extracted = data.get("extractedData") or {}
    return ApplicationDTO(
        id=data["id"],
        job_id=data["jobId"],
        branch_id=data.get("branchId", ""),
        candidate_info=CandidateInfo(
            full_name=info.get("fullName", ""),
            email=info.get("email", ""),
            phone=info.get("phone", ""),
            current_salary=str(info.get("currentSalary", "")),
            expected_salary=str(info.get("expectedSalary", "")),
            notice_period=str(info.get("noticePeriod", "")),
            source=info.get("source"),
        ),
        extracted_data=ExtractedCVData(
            skills=list(extracted.get("skills") or []),
            experience_years=float(extracted.get("experienceYears") or 0),
            education=extracted.get("education", ""),
            summary=extracted.get("summary", ""),
            current_title=extracted.get("currentTitle", ""),
        ),
        match_score=float(data.get("matchScore") or 0),
        strengths=list(data.get("strengths") or []),
        skill_gaps=list(data.get("skillGaps") or []),
        status=data.get("status", "PENDING"),
        archived=bool(data.get("archived", False)),
    )


def build_context(config) -> AppContext:
    factory = sessionmaker(autocommit=False, autoflush=False, bind=make_engine(config.database.url))
    return AppContext.build(config, factory)


def cmd_init_db(args, config) -> int:
    created = init_db(config.access, bind=make_engine(config.database.url))
    logger.info(f"Database initialized: {created}")
    return 0


def cmd_import(args, config) -> int:
    """Load {"jobs": [...], "applications": [...]} exported records."""
    with open(args.path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    with build_context(config).uow() as repo:
        jobs = [job_from_json(j) for j in payload.get("jobs", [])]
        for job in jobs:
            repo.save_job(job)
        apps = [application_from_json(a) for a in payload.get("applications", [])]
        for app in apps:
            repo.save_application(app)

    logger.info(f"Imported {len(jobs)} job(s) and {len(apps)} application(s)")
    return 0


def cmd_rank(args, config) -> int:
    defaults = config.ranking.default_weights
    weights = RankingWeights(
        skills=defaults.skills if args.skills is None else args.skills,
        salary=defaults.salary if args.salary is None else args.salary,
        experience=defaults.experience if args.experience is None else args.experience,
        availability=defaults.availability if args.availability is None else args.availability,
    )

    ctx = build_context(config)
    with ctx.uow() as repo:
        ranked = ctx.ranking_service(repo).rank_job(args.job_id, weights)

    rows: List[Dict[str, Any]] = [c.to_dict() for c in ranked]
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0

    for pos, row in enumerate(rows, start=1):
        print(f"{pos:>3}. {row['fullName'] or row['id']:<30} score={row['intelligenceScore']:>4} "
              f"fit={row['fitStatus']:<6} risk={row['riskLevel']:<6} salary={row['salaryAlignment']}%")
    return 0


def cmd_serve(args, config) -> int:
    from web.backend.config import CONFIG_PATH_ENV, get_config

    # The web app loads its own config; point it at the same file
    os.environ[CONFIG_PATH_ENV] = os.path.abspath(args.config)
    get_config.cache_clear()

    from web.backend.app import main as serve
    serve()
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="HireAI Console")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('init-db', help='Create tables and seed system roles and the primary admin')

    p_import = sub.add_parser('import', help='Import jobs and applications from a JSON export')
    p_import.add_argument('path', type=str)

    p_rank = sub.add_parser('rank', help='Print the candidate ranking for a job')
    p_rank.add_argument('job_id', type=str)
    p_rank.add_argument('--skills', type=float, default=None)
    p_rank.add_argument('--salary', type=float, default=None)
    p_rank.add_argument('--experience', type=float, default=None)
    p_rank.add_argument('--availability', type=float, default=None)
    p_rank.add_argument('--json', action='store_true', help='Emit JSON instead of a table')

    sub.add_parser('serve', help='Run the web API')

    args = parser.parse_args(argv)
    config = load_config(args.config)

    handlers = {
        'init-db': cmd_init_db,
        'import': cmd_import,
        'rank': cmd_rank,
        'serve': cmd_serve,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
