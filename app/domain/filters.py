"""
Reusable shift-report filters.
Keeps the WHERE-clause logic in one place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ReportFilters:
    """
    Store + date range applied to shift-report queries.
    The range is half-open [start_date, end_date) unless include_end is set;
    either bound may be omitted.
    """

    store_id: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    include_end: bool = False

    def to_sql_conditions(self, alias: str = "r") -> tuple[list[str], dict]:
        """
        Convert the filters into SQL conditions and bind parameters.

        Returns:
            Tuple of WHERE conditions and parameter dict
        """
        conditions = [f"{alias}.store_id = :store_id"]
        params: dict = {"store_id": self.store_id}

        if self.start_date is not None:
            conditions.append(f"{alias}.report_date >= :start_date")
            params["start_date"] = self.start_date

        if self.end_date is not None:
            op = "<=" if self.include_end else "<"
            conditions.append(f"{alias}.report_date {op} :end_date")
            params["end_date"] = self.end_date

        return conditions, params

    def apply_to_query(self, base_query: str, alias: str = "r") -> tuple[str, dict]:
        """
        Append the filters to a base query.

        Args:
            base_query: SQL without WHERE
            alias: alias of the shift_reports table in the query

        Returns:
            Tuple of full query and parameters
        """
        conditions, params = self.to_sql_conditions(alias)
        query = f"{base_query} WHERE {' AND '.join(conditions)}"
        return query, params

    def contains(self, moment: datetime) -> bool:
        """Whether a report date falls inside the range."""
        if self.start_date is not None and moment < self.start_date:
            return False
        if self.end_date is not None:
            if self.include_end:
                return moment <= self.end_date
            return moment < self.end_date
        return True
