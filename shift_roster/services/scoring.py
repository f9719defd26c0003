"""Candidate ranking for contested shifts."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple


def distance_from_goal(current_hours: float, hour_goal: float, unbounded: bool = False) -> float:
    """
    Absolute distance between hours assigned so far and the goal.

    Unbounded goals have distance 0 so they never jump the queue.
    """
    if unbounded:
        return 0
    return abs(current_hours - hour_goal)


def flexibility(employee) -> int:
    """Number of (day, shift type) slots the employee is available for across the week."""
    return sum(len(shifts) for shifts in employee.availability_map.values())


def candidate_sort_key(distance: float, flex: int) -> Tuple[float, int]:
    """Further from goal first, then fewer available slots first."""
    return (-distance, flex)


def rank_candidates(
    candidates: Sequence,
    ledger: Dict[str, float],
    goals: Dict[str, float],
    unbounded: Dict[str, bool],
    flex: Dict[str, int],
) -> List:
    """
    Order candidates for a slot.

    Args:
        candidates: Employees in roster order
        ledger: Name -> hours assigned so far
        goals: Name -> resolved hour goal
        unbounded: Name -> whether the goal is the unbounded sentinel
        flex: Name -> flexibility

    Returns:
        Candidates sorted by distance from goal (desc), flexibility (asc);
        remaining ties keep roster order (``sorted`` is stable).
    """
    def key(emp):
        name = emp.name
        dist = distance_from_goal(ledger.get(name, 0.0), goals[name], unbounded[name])
        return candidate_sort_key(dist, flex[name])

    return sorted(candidates, key=key)
