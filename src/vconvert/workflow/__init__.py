"""Conversion workflow: resolve a request into an executable plan."""

from vconvert.workflow.planner import ConversionPlan, plan_conversion

__all__ = [
    "ConversionPlan",
    "plan_conversion",
]
