"""
Member data consumed from the user-profile collaborator.
"""

from typing import Optional

from pydantic import BaseModel, Field

from domain.models.enums import LiftType


class MemberMaxLifts(BaseModel):
    """One-rep maxes for a member; any lift may be unset."""

    max_bench: Optional[float] = None
    max_ohp: Optional[float] = None
    max_squat: Optional[float] = None
    max_deadlift: Optional[float] = None

    def for_lift(self, lift: LiftType) -> Optional[float]:
        return {
            LiftType.BENCH: self.max_bench,
            LiftType.OHP: self.max_ohp,
            LiftType.SQUAT: self.max_squat,
            LiftType.DEADLIFT: self.max_deadlift,
        }[lift]


class MemberProfile(BaseModel):
    """Subset of the user profile needed for rosters and weight lookups."""

    id: str
    first_name: str = ""
    last_name: str = ""
    max_lifts: MemberMaxLifts = Field(default_factory=MemberMaxLifts)

    @classmethod
    def from_row(cls, row: dict) -> "MemberProfile":
        """Build a profile from a flat ``users`` table row."""
        return cls(
            id=row["id"],
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            max_lifts=MemberMaxLifts(
                max_bench=row.get("max_bench"),
                max_ohp=row.get("max_ohp"),
                max_squat=row.get("max_squat"),
                max_deadlift=row.get("max_deadlift"),
            ),
        )

    @property
    def last_initial(self) -> str:
        return self.last_name[:1]
