import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///hireai.db"
    echo: bool = False


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    login_rate_limit: str = "10/minute"
    apply_rate_limit: str = "20/minute"


class RankingWeightsConfig(BaseModel):
    """Default slider positions for the candidate intelligence view."""
    skills: float = 50.0
    salary: float = 20.0
    experience: float = 20.0
    availability: float = 10.0


class RankingConfig(BaseModel):
    """
    Configuration for the RankingEngine.

    Jobs without an explicit salary_budget fall back to the legacy
    threshold heuristic: budget_with_threshold when the job's matching
    threshold is positive, budget_without_threshold otherwise.
    """
    default_weights: RankingWeightsConfig = Field(default_factory=RankingWeightsConfig)
    budget_with_threshold: float = 3000.0
    budget_without_threshold: float = 2000.0

    # composite = sum(factor * weight) when False,
    # composite = 100 * sum(factor * weight) / sum(weight) when True
    normalize_scores: bool = False

    experience_overqualification_cap: float = 1.2


class AccessConfig(BaseModel):
    """Bootstrap credentials and session settings."""
    admin_email: str = "admin@protocol.ai"
    admin_password: str = "Admin@123"
    admin_full_name: str = "System Architect"
    main_branch_id: str = "main-hub"
    main_branch_name: str = "Central Intelligence Hub"
    company_name: str = "Protocol AI Global"
    branch_email_domain: str = "company.com"
    session_ttl_minutes: int = 480
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    access: AccessConfig = Field(default_factory=AccessConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    # Bootstrap administrator
    if 'HIREAI_ADMIN_EMAIL' in os.environ:
        data.setdefault('access', {})
        data['access']['admin_email'] = os.environ['HIREAI_ADMIN_EMAIL']

    if 'HIREAI_ADMIN_PASSWORD' in os.environ:
        data.setdefault('access', {})
        data['access']['admin_password'] = os.environ['HIREAI_ADMIN_PASSWORD']

    if 'HIREAI_JWT_SECRET' in os.environ:
        data.setdefault('access', {})
        data['access']['jwt_secret'] = os.environ['HIREAI_JWT_SECRET']

    return data


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root
    if config_path and not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)

    return AppConfig(**data)
