"""
Pydantic schemas for exporting a validated hierarchy.

Employees are listed flat and refer to their reports by id, so the
payload depth does not grow with the depth of the organization.
"""
from typing import List, Optional
from pydantic import BaseModel


class EmployeeNodeResponse(BaseModel):
    """One employee, their subtree budget and their direct reports' ids."""
    id: int
    employee: str
    manager_id: Optional[int] = None
    depth: int
    salary: int
    salary_budget: int
    reports: List[int] = []


class HierarchyResponse(BaseModel):
    """Response for a fully built hierarchy."""
    total_employees: int
    reachable_employees: int
    total_salary: int
    root_id: int
    employees: List[EmployeeNodeResponse]
