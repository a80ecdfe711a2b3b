from app.upload.models import UploadOutcome
from app.upload.request_uploader import RequestUploader
from app.upload.rule_key_log_uploader import RuleKeyLogFileUploader

__all__ = ["RequestUploader", "RuleKeyLogFileUploader", "UploadOutcome"]
