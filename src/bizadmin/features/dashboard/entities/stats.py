"""Dashboard statistics entities."""

from dataclasses import dataclass, field
from typing import List

from ..utils.charts import segment_count, y_axis_labels, y_axis_max


@dataclass(frozen=True)
class ChartAxis:
    maximum: int
    labels: List[int]
    segments: int

    @classmethod
    def for_values(cls, values: List[int]) -> "ChartAxis":
        maximum = y_axis_max(values)
        return cls(maximum=maximum, labels=y_axis_labels(maximum), segments=segment_count(maximum))


@dataclass(frozen=True)
class CompanyRanking:
    company_id: str
    name: str
    employee_count: int
    growth_percentage: str


@dataclass(frozen=True)
class EmployeeRanking:
    employee_id: str
    name: str
    company_name: str
    forms_count: int


@dataclass
class SuperAdminStats:
    """Everything the super admin dashboard shows.

    ``errors`` names the queries that failed; their counts read as 0.
    """

    total_companies: int = 0
    active_companies: int = 0
    company_growth: str = "+0%"
    total_employees: int = 0
    employee_growth: str = "+0%"
    total_tasks: int = 0
    task_growth: str = "+0%"
    pending_tasks: int = 0
    completed_tasks: int = 0
    overdue_tasks: int = 0
    total_forms: int = 0
    form_growth: str = "+0%"
    month_labels: List[str] = field(default_factory=list)
    monthly_companies: List[int] = field(default_factory=list)
    monthly_forms: List[int] = field(default_factory=list)
    top_companies: List[CompanyRanking] = field(default_factory=list)
    top_employees: List[EmployeeRanking] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.errors)

    @property
    def company_axis(self) -> ChartAxis:
        return ChartAxis.for_values(self.monthly_companies)

    @property
    def form_axis(self) -> ChartAxis:
        return ChartAxis.for_values(self.monthly_forms)
