from .loader import Scenario, load_scenarios

__all__ = ["Scenario", "load_scenarios"]
