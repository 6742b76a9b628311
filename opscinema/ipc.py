"""Request payloads and the locked command list of the IPC surface."""

from __future__ import annotations

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import StrictBool, StrictStr, field_validator

from .models import (
    I64,
    U32,
    EvidenceLocator,
    JobStatus,
    StepEditOpField,
    _Model,
)


class SessionCreateRequest(_Model):
    label: StrictStr
    metadata: dict[StrictStr, StrictStr]

    @field_validator("metadata")
    @classmethod
    def _sorted_metadata(cls, value: dict[str, str]) -> dict[str, str]:
        return dict(sorted(value.items()))


class SessionListRequest(_Model):
    limit: Optional[U32] = None


class SessionGetRequest(_Model):
    session_id: UUID


class SessionCloseRequest(_Model):
    session_id: UUID


class TimelineKeyframesRequest(_Model):
    session_id: UUID
    start_ms: I64
    end_ms: I64


class TimelineEventsRequest(_Model):
    session_id: UUID
    after_seq: Optional[I64] = None
    limit: Optional[U32] = None


class TimelineThumbnailRequest(_Model):
    session_id: UUID
    frame_event_id: UUID


class CaptureStartRequest(_Model):
    session_id: UUID


class CaptureStopRequest(_Model):
    session_id: UUID


class CaptureStatusRequest(_Model):
    session_id: Optional[UUID] = None


class OcrScheduleRequest(_Model):
    session_id: UUID
    start_ms: Optional[I64] = None
    end_ms: Optional[I64] = None


class OcrStatusRequest(_Model):
    session_id: UUID


class OcrSearchRequest(_Model):
    session_id: UUID
    query: StrictStr


class OcrBlocksForFrameRequest(_Model):
    session_id: UUID
    frame_event_id: UUID


class EvidenceForTimeRangeRequest(_Model):
    session_id: UUID
    start_ms: I64
    end_ms: I64


class EvidenceForStepRequest(_Model):
    session_id: UUID
    step_id: UUID


class EvidenceFindTextRequest(_Model):
    session_id: UUID
    query: StrictStr


class EvidenceCoverageRequest(_Model):
    session_id: UUID


class StepsGenerateCandidatesRequest(_Model):
    session_id: UUID


class StepsListRequest(_Model):
    session_id: UUID


class StepsGetRequest(_Model):
    session_id: UUID
    step_id: UUID


class StepsApplyEditRequest(_Model):
    session_id: UUID
    base_seq: I64
    op: StepEditOpField


class StepsValidateRequest(_Model):
    session_id: UUID


class AnchorsListForStepRequest(_Model):
    session_id: UUID
    step_id: UUID


class AnchorsReacquireRequest(_Model):
    session_id: UUID
    step_id: UUID


class AnchorsManualSetRequest(_Model):
    session_id: UUID
    anchor_id: UUID
    locators: list[EvidenceLocator]
    note: Optional[StrictStr] = None


class AnchorsDebugRequest(_Model):
    session_id: UUID
    step_id: UUID


class TutorialGenerateRequest(_Model):
    session_id: UUID


class TutorialExportRequest(_Model):
    session_id: UUID
    output_dir: StrictStr


class TutorialValidateExportRequest(_Model):
    session_id: UUID


class ExplainThisScreenRequest(_Model):
    session_id: UUID
    frame_event_id: UUID


class ProofGetViewRequest(_Model):
    session_id: UUID


class RunbookCreateRequest(_Model):
    session_id: UUID
    title: StrictStr


class RunbookUpdateRequest(_Model):
    runbook_id: UUID
    title: Optional[StrictStr] = None


class RunbookExportRequest(_Model):
    runbook_id: UUID
    output_dir: StrictStr


class ProofExportRequest(_Model):
    session_id: UUID
    output_dir: StrictStr


class VerifierListRequest(_Model):
    include_disabled: StrictBool


class VerifierRunRequest(_Model):
    session_id: UUID
    verifier_id: StrictStr


class VerifierGetResultRequest(_Model):
    run_id: UUID


class ModelsListRequest(_Model):
    include_unhealthy: StrictBool


class ModelRegisterRequest(_Model):
    provider: StrictStr
    label: StrictStr
    model_name: StrictStr
    digest: StrictStr


class ModelsRemoveRequest(_Model):
    model_id: StrictStr


class OllamaListRequest(_Model):
    host: Optional[StrictStr] = None


class OllamaPullRequest(_Model):
    host: Optional[StrictStr] = None
    model: StrictStr


class OllamaRunRequest(_Model):
    model_id: StrictStr
    prompt: StrictStr


class MlxRunRequest(_Model):
    model_id: StrictStr
    prompt: StrictStr


class BenchRunRequest(_Model):
    model_id: StrictStr
    benchmark: StrictStr


class BenchListRequest(_Model):
    limit: Optional[U32] = None


class AgentPipelineRunRequest(_Model):
    session_id: UUID
    pipeline_id: StrictStr


class AgentPipelineReportRequest(_Model):
    run_id: UUID


class ExportsListRequest(_Model):
    session_id: Optional[UUID] = None


class ExportVerifyRequest(_Model):
    bundle_path: StrictStr


class JobsListRequest(_Model):
    session_id: Optional[UUID] = None
    status: Optional[JobStatus] = None


class JobsGetRequest(_Model):
    job_id: UUID


class JobsCancelRequest(_Model):
    job_id: UUID


class IpcCommand(str, Enum):
    """Every command the backend answers; the order is locked."""

    APP_GET_BUILD_INFO = "app_get_build_info"
    APP_GET_PERMISSIONS_STATUS = "app_get_permissions_status"
    SETTINGS_GET = "settings_get"
    SETTINGS_SET = "settings_set"
    NETWORK_ALLOWLIST_GET = "network_allowlist_get"
    NETWORK_ALLOWLIST_SET = "network_allowlist_set"
    SESSION_CREATE = "session_create"
    SESSION_LIST = "session_list"
    SESSION_GET = "session_get"
    SESSION_CLOSE = "session_close"
    TIMELINE_GET_KEYFRAMES = "timeline_get_keyframes"
    TIMELINE_GET_EVENTS = "timeline_get_events"
    TIMELINE_GET_THUMBNAIL = "timeline_get_thumbnail"
    CAPTURE_GET_CONFIG = "capture_get_config"
    CAPTURE_SET_CONFIG = "capture_set_config"
    CAPTURE_START = "capture_start"
    CAPTURE_STOP = "capture_stop"
    CAPTURE_GET_STATUS = "capture_get_status"
    OCR_SCHEDULE = "ocr_schedule"
    OCR_GET_STATUS = "ocr_get_status"
    OCR_SEARCH = "ocr_search"
    OCR_GET_BLOCKS_FOR_FRAME = "ocr_get_blocks_for_frame"
    EVIDENCE_FOR_TIME_RANGE = "evidence_for_time_range"
    EVIDENCE_FOR_STEP = "evidence_for_step"
    EVIDENCE_FIND_TEXT = "evidence_find_text"
    EVIDENCE_GET_COVERAGE = "evidence_get_coverage"
    STEPS_GENERATE_CANDIDATES = "steps_generate_candidates"
    STEPS_LIST = "steps_list"
    STEPS_GET = "steps_get"
    STEPS_APPLY_EDIT = "steps_apply_edit"
    STEPS_VALIDATE = "steps_validate"
    ANCHORS_LIST_FOR_STEP = "anchors_list_for_step"
    ANCHORS_REACQUIRE = "anchors_reacquire"
    ANCHORS_MANUAL_SET = "anchors_manual_set"
    ANCHORS_DEBUG = "anchors_debug"
    TUTORIAL_GENERATE = "tutorial_generate"
    TUTORIAL_EXPORT_PACK = "tutorial_export_pack"
    TUTORIAL_VALIDATE_EXPORT = "tutorial_validate_export"
    EXPLAIN_THIS_SCREEN = "explain_this_screen"
    PROOF_GET_VIEW = "proof_get_view"
    RUNBOOK_CREATE = "runbook_create"
    RUNBOOK_UPDATE = "runbook_update"
    RUNBOOK_EXPORT = "runbook_export"
    PROOF_EXPORT_BUNDLE = "proof_export_bundle"
    VERIFIER_LIST = "verifier_list"
    VERIFIER_RUN = "verifier_run"
    VERIFIER_GET_RESULT = "verifier_get_result"
    MODELS_LIST = "models_list"
    MODELS_REGISTER = "models_register"
    MODELS_REMOVE = "models_remove"
    MODEL_ROLES_GET = "model_roles_get"
    MODEL_ROLES_SET = "model_roles_set"
    OLLAMA_LIST = "ollama_list"
    OLLAMA_PULL = "ollama_pull"
    OLLAMA_RUN = "ollama_run"
    MLX_RUN = "mlx_run"
    BENCH_RUN = "bench_run"
    BENCH_LIST = "bench_list"
    AGENT_PIPELINES_LIST = "agent_pipelines_list"
    AGENT_PIPELINE_RUN = "agent_pipeline_run"
    AGENT_PIPELINE_REPORT = "agent_pipeline_report"
    EXPORTS_LIST = "exports_list"
    EXPORT_VERIFY_BUNDLE = "export_verify_bundle"
    JOBS_LIST = "jobs_list"
    JOBS_GET = "jobs_get"
    JOBS_CANCEL = "jobs_cancel"

    def as_str(self) -> str:
        """The command's wire name."""
        return self.value


LOCKED_COMMANDS: tuple[IpcCommand, ...] = tuple(IpcCommand)


def locked_commands() -> tuple[IpcCommand, ...]:
    """All commands in their locked order."""
    return LOCKED_COMMANDS