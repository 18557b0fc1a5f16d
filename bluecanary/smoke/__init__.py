from bluecanary.smoke.client import PredictionClient
from bluecanary.smoke.harness import CheckResult, LoadReport, SmokeReport, SmokeSuite

__all__ = ["CheckResult", "LoadReport", "PredictionClient", "SmokeReport", "SmokeSuite"]
