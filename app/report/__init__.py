from app.report.base import BaseDefectReporter
from app.report.http_defect_reporter import HttpDefectReporter
from app.report.models import DefectReport, DefectSubmitResult

__all__ = ["BaseDefectReporter", "DefectReport", "DefectSubmitResult", "HttpDefectReporter"]
