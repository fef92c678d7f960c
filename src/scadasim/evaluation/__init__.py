"""Derived process KPI evaluation."""

from scadasim.evaluation.kpi import KpiEstimator, KpiModel, ProcessKpis, derive_process_kpis

__all__ = [
    "KpiEstimator",
    "KpiModel",
    "ProcessKpis",
    "derive_process_kpis",
]
