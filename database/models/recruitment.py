from sqlalchemy import Column, Text, Boolean, Integer, Float, TIMESTAMP, ForeignKey, JSON, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class JobPost(Base):
    __tablename__ = 'job_post'

    id = Column(Text, primary_key=True)
    branch_id = Column(Text, ForeignKey('branch.id', ondelete='SET NULL'), nullable=True)

    title = Column(Text, nullable=False)
    department = Column(Text, nullable=False, default='')
    location = Column(Text, nullable=False, default='')
    description = Column(Text, nullable=False, default='')
    job_type = Column(Text, nullable=False, default='Full-time')
    experience_level = Column(Text, nullable=False, default='Mid Level')
    status = Column(Text, nullable=False, default='OPEN')  # OPEN|CLOSED

    required_skills = Column(JSON, nullable=False, default=list)
    keywords = Column(JSON, nullable=False, default=list)
    min_years_experience = Column(Float, nullable=False, default=0)
    required_education_level = Column(Text, nullable=False, default='No degree required')

    # {"skillWeight", "experienceWeight", "educationWeight", "keywordsWeight", "threshold"}
    matching_rules = Column(JSON, nullable=False, default=dict)
    salary_budget = Column(Float, nullable=True)

    archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    applications = relationship("Application", back_populates="job_post", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_post_branch', 'branch_id'),
        Index('idx_job_post_status', 'status'),
    )


class Application(Base):
    __tablename__ = 'application'

    id = Column(Text, primary_key=True)
    job_id = Column(Text, ForeignKey('job_post.id', ondelete='CASCADE'), nullable=False)
    branch_id = Column(Text, nullable=True)

    # {"fullName", "email", "phone", "currentSalary", "expectedSalary", "noticePeriod", "source"}
    candidate_info = Column(JSON, nullable=False, default=dict)
    # {"skills", "experienceYears", "education", "summary", "currentTitle"}
    extracted_data = Column(JSON, nullable=False, default=dict)

    # Produced by the external AI screening step
    match_score = Column(Float, nullable=False, default=0)
    match_reasoning = Column(Text, nullable=False, default='')
    strengths = Column(JSON, nullable=False, default=list)
    skill_gaps = Column(JSON, nullable=False, default=list)

    status = Column(Text, nullable=False, default='PENDING')
    archived = Column(Boolean, nullable=False, default=False)
    version = Column(Integer, nullable=False, default=1)
    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    job_post = relationship("JobPost", back_populates="applications")

    __table_args__ = (
        Index('idx_application_job', 'job_id'),
        Index('idx_application_status', 'status'),
        Index('idx_application_match_score', 'match_score'),
    )
