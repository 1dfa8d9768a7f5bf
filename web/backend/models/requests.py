#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class LoginRequest(BaseModel):
    """Console credentials."""
    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Account password")


class ModulePermissionPayload(BaseModel):
    """Actions granted on one module, e.g. {"moduleId": "JOBS", "actions": ["VIEW"]}."""
    moduleId: str
    actions: List[str] = Field(default_factory=list)


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    permissions: List[ModulePermissionPayload] = Field(default_factory=list)


class RoleUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[ModulePermissionPayload]] = None


class AdminUserCreate(BaseModel):
    fullName: str = Field(..., min_length=1)
    email: str
    password: str = Field(..., min_length=1)
    roleId: str
    position: str = ""
    phone: str = ""
    branchId: Optional[str] = None


class BranchCreate(BaseModel):
    name: str = Field(..., min_length=1)
    companyName: str = Field(..., min_length=1)


class MatchingRulesPayload(BaseModel):
    """Screening weights and pass threshold, each 0-100."""
    skillWeight: float = Field(default=40, ge=0, le=100)
    experienceWeight: float = Field(default=30, ge=0, le=100)
    educationWeight: float = Field(default=15, ge=0, le=100)
    keywordsWeight: float = Field(default=15, ge=0, le=100)
    threshold: float = Field(default=60, ge=0, le=100)


class JobCreate(BaseModel):
    title: str = Field(..., min_length=1)
    department: str = ""
    location: str = ""
    minYearsExperience: float = Field(default=0, ge=0)
    requiredSkills: List[str] = Field(default_factory=list)
    matchingRules: Optional[MatchingRulesPayload] = None
    salaryBudget: Optional[float] = Field(default=None, gt=0)
    status: str = "OPEN"


class JobUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged. ``archived`` archives or restores."""
    title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    minYearsExperience: Optional[float] = Field(default=None, ge=0)
    requiredSkills: Optional[List[str]] = None
    matchingRules: Optional[MatchingRulesPayload] = None
    salaryBudget: Optional[float] = Field(default=None, gt=0)
    status: Optional[str] = None
    archived: Optional[bool] = None


class ApplicationSubmit(BaseModel):
    """Public application form plus the CV screening output."""
    fullName: str
    email: str
    phone: str
    currentSalary: str = ""
    expectedSalary: str = ""
    noticePeriod: str = ""
    source: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experienceYears: float = Field(default=0, ge=0)
    education: str = ""
    summary: str = ""
    currentTitle: str = ""
    matchScore: float = Field(default=0, ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    skillGaps: List[str] = Field(default_factory=list)


class ApplicationUpdate(BaseModel):
    status: Optional[str] = None
    archived: Optional[bool] = None
