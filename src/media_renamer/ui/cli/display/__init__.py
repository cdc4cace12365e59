from .plan_display import PlanDisplay

__all__ = ["PlanDisplay"]
