#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class ModulePermissionModel(BaseModel):
    moduleId: str
    actions: List[str]


class RoleModel(BaseModel):
    id: str
    name: str
    description: str
    permissions: List[ModulePermissionModel]
    isSystem: bool


class RolesResponse(BaseModel):
    success: bool = True
    count: int
    roles: List[RoleModel]


class AdminUserModel(BaseModel):
    id: str
    fullName: str
    email: str
    position: str
    phone: str
    roleId: str
    branchId: str
    createdAt: Optional[str]


class TeamResponse(BaseModel):
    success: bool = True
    count: int
    users: List[AdminUserModel]


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: AdminUserModel


class NavLinkModel(BaseModel):
    to: str
    label: str
    icon: str = ""


class SessionResponse(BaseModel):
    """Current actor with the navigation and permissions it resolves to."""
    success: bool = True
    authenticated: bool
    user: Optional[AdminUserModel] = None
    roleId: Optional[str] = None
    roleName: Optional[str] = None
    permissions: List[ModulePermissionModel] = Field(default_factory=list)
    navigation: List[NavLinkModel] = Field(default_factory=list)


class BranchModel(BaseModel):
    id: str
    name: str
    companyName: str
    createdAt: Optional[str]


class BranchesResponse(BaseModel):
    success: bool = True
    count: int
    branches: List[BranchModel]


class ProvisionedBranchResponse(BaseModel):
    """The generated password is only ever shown in this response."""
    success: bool = True
    branch: BranchModel
    admin: AdminUserModel
    email: str
    password: str


class JobSummary(BaseModel):
    id: str
    title: str
    branchId: str
    department: str
    location: str
    status: str
    minYearsExperience: float
    threshold: float
    salaryBudget: Optional[float]
    requiredSkills: List[str] = Field(default_factory=list)
    archived: bool = False


class JobsResponse(BaseModel):
    success: bool = True
    count: int
    jobs: List[JobSummary]


class ApplicationSummary(BaseModel):
    id: str
    jobId: str
    fullName: str
    email: str
    matchScore: float
    status: str
    archived: bool
    expectedSalary: str
    noticePeriod: str
    version: int = 1


class ApplicationsResponse(BaseModel):
    success: bool = True
    count: int
    applications: List[ApplicationSummary]


class RankedCandidateModel(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "app-1",
                "jobId": "job-1",
                "fullName": "Jane Doe",
                "matchScore": 80,
                "experienceYears": 4,
                "expectedSalary": "3000",
                "noticePeriod": "Immediate",
                "intelligenceScore": 84,
                "fitStatus": "High",
                "riskLevel": "High",
                "salaryAlignment": 50,
                "factors": {"skills": 0.8, "salary": 0.5, "experience": 1.2, "availability": 1.0}
            }
        }
    )

    id: str
    jobId: str
    fullName: str
    matchScore: float
    experienceYears: float
    expectedSalary: str
    noticePeriod: str
    intelligenceScore: int
    fitStatus: str
    riskLevel: str
    salaryAlignment: int = Field(ge=0, le=100)
    factors: Dict[str, float] = Field(default_factory=dict)


class RankingResponse(BaseModel):
    success: bool = True
    jobId: str
    budget: float
    normalized: bool
    weights: Dict[str, float]
    count: int
    candidates: List[RankedCandidateModel]


class ActionResponse(BaseModel):
    success: bool = True
    message: str
    details: Optional[Dict[str, Any]] = None
