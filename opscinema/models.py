"""Data model shared by the backend and its clients."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, ClassVar, Generic, Optional, TypeVar
from uuid import UUID

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    Strict,
    StrictBool,
    StrictStr,
)

from .errors import AppError

U8 = Annotated[int, Strict(), Field(ge=0, le=0xFF)]
U32 = Annotated[int, Strict(), Field(ge=0, le=0xFFFFFFFF)]
U64 = Annotated[int, Strict(), Field(ge=0, le=0xFFFFFFFFFFFFFFFF)]
I32 = Annotated[int, Strict(), Field(ge=-(2**31), le=2**31 - 1)]
I64 = Annotated[int, Strict(), Field(ge=-(2**63), le=2**63 - 1)]


def _validate_app_error(value: Any) -> AppError:
    if isinstance(value, AppError):
        return value
    return AppError.from_dict(value)


def _serialize_app_error(value: AppError) -> dict:
    return value.to_dict()


AppErrorField = Annotated[
    AppError, PlainValidator(_validate_app_error), PlainSerializer(_serialize_app_error)
]


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs: Any) -> str:
        kwargs.setdefault("by_alias", True)
        return super().model_dump_json(**kwargs)


class AssetRef(_Model):
    asset_id: StrictStr


class BuildInfo(_Model):
    app_name: StrictStr
    app_version: StrictStr
    commit: StrictStr
    built_at: AwareDatetime


class PermissionsStatus(_Model):
    screen_recording: StrictBool
    accessibility: StrictBool
    full_disk_access: StrictBool


class AppSettings(_Model):
    offline_mode: StrictBool
    allow_input_capture: StrictBool
    allow_window_metadata: StrictBool


class NetworkAllowlist(_Model):
    entries: list[StrictStr]


class NetworkAllowlistUpdate(_Model):
    entries: list[StrictStr]


class SessionSummary(_Model):
    session_id: UUID
    label: StrictStr
    created_at: AwareDatetime
    closed_at: Optional[AwareDatetime] = None
    head_seq: I64
    head_hash: StrictStr


class SessionDetail(_Model):
    summary: SessionSummary
    metadata: dict[StrictStr, StrictStr]


class TimelineEvent(_Model):
    seq: I64
    event_id: UUID
    event_type: StrictStr
    frame_ms: Optional[I64] = None


class TimelineKeyframe(_Model):
    frame_ms: I64
    frame_event_id: UUID
    asset: AssetRef


class CaptureConfig(_Model):
    keyframe_interval_ms: U32
    include_input: StrictBool
    include_window_meta: StrictBool


class CaptureState(str, Enum):
    IDLE = "IDLE"
    CAPTURING = "CAPTURING"
    STOPPED = "STOPPED"


class CaptureStatus(_Model):
    state: CaptureState
    session_id: Optional[UUID] = None
    started_at: Optional[AwareDatetime] = None


class JobStatus(str, Enum):
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class JobHandle(_Model):
    job_id: UUID


class JobCounters(_Model):
    done: U64
    total: U64


class JobProgress(_Model):
    stage: StrictStr
    pct: U8
    counters: JobCounters


class JobDetail(_Model):
    job_id: UUID
    job_type: StrictStr
    session_id: Optional[UUID] = None
    status: JobStatus
    created_at: AwareDatetime
    started_at: Optional[AwareDatetime] = None
    ended_at: Optional[AwareDatetime] = None
    progress: Optional[JobProgress] = None
    error: Optional[AppErrorField] = None


class JobsListResponse(_Model):
    jobs: list[JobDetail]


class JobsCancelResponse(_Model):
    accepted: StrictBool


class BBoxNorm(_Model):
    x: U32
    y: U32
    w: U32
    h: U32


class TextOffset(_Model):
    start: U32
    end: U32


class OcrBlock(_Model):
    ocr_block_id: StrictStr
    bbox_norm: BBoxNorm
    text: StrictStr
    confidence: U8
    language: Optional[StrictStr] = None


class OcrStatus(_Model):
    queued_frames: U32
    indexed_frames: U32


class OcrSearchHit(_Model):
    frame_ms: I64
    block_id: StrictStr
    snippet: StrictStr


class OcrSearchResponse(_Model):
    hits: list[OcrSearchHit]


class OcrBlocksForFrameResponse(_Model):
    blocks: list[OcrBlock]


class EvidenceLocatorType(str, Enum):
    TIMELINE = "timeline"
    FRAME_BBOX = "frame_bbox"
    OCR_BBOX = "ocr_bbox"
    ANCHOR_BBOX = "anchor_bbox"
    VERIFIER_LOG = "verifier_log"
    FILE_PATH = "file_path"


class EvidenceLocator(_Model):
    locator_type: EvidenceLocatorType
    asset_id: Optional[StrictStr] = None
    frame_ms: Optional[I64] = None
    bbox_norm: Optional[BBoxNorm] = None
    text_offset: Optional[TextOffset] = None
    note: Optional[StrictStr] = None


class EvidenceItem(_Model):
    evidence_id: UUID
    kind: StrictStr
    source_id: StrictStr
    locators: list[EvidenceLocator]


class EvidenceSet(_Model):
    evidence: list[EvidenceItem]


class EvidenceFindTextResponse(_Model):
    evidence: list[EvidenceItem]


class EvidenceCoverageResponse(_Model):
    missing_step_ids: list[UUID]
    missing_generated_block_ids: list[StrictStr]
    pass_: StrictBool = Field(alias="pass")


class TextBlockProvenance(str, Enum):
    HUMAN = "human"
    GENERATED = "generated"


class TextBlock(_Model):
    block_id: StrictStr
    text: StrictStr
    provenance: TextBlockProvenance
    evidence_refs: list[UUID]


class StructuredText(_Model):
    blocks: list[TextBlock]


class Step(_Model):
    step_id: UUID
    order_index: U32
    title: StrictStr
    body: StructuredText
    risk_tags: list[StrictStr]
    branch_label: Optional[StrictStr] = None


class StepsListResponse(_Model):
    steps: list[Step]
    head_seq: I64


class AnchorKind(str, Enum):
    UI_TARGET = "ui_target"
    OCR_PHRASE = "ocr_phrase"
    VISION_ANCHOR = "vision_anchor"


class AnchorCandidate(_Model):
    anchor_id: UUID
    step_id: UUID
    kind: AnchorKind
    target_signature: StrictStr
    confidence: U8
    locators: list[EvidenceLocator]
    degraded: StrictBool


class StepDetail(_Model):
    step: Step
    anchors: list[AnchorCandidate]


class StepEditOp(_Model):
    """An edit to a session's steps; serialised as ``{tag: fields}``."""

    tag: ClassVar[str] = ""

    def to_json_value(self) -> dict[str, Any]:
        """Return the externally tagged JSON form of this edit."""
        if not self.tag:
            raise TypeError("StepEditOp must be used through one of its variants")
        return {self.tag: self.model_dump(mode="json")}


class InsertAfterOp(StepEditOp):
    tag: ClassVar[str] = "insert_after"
    after_step_id: UUID
    step: Step


class UpdateTitleOp(StepEditOp):
    tag: ClassVar[str] = "update_title"
    step_id: UUID
    title: StrictStr


class ReplaceBodyOp(StepEditOp):
    tag: ClassVar[str] = "replace_body"
    step_id: UUID
    body: StructuredText


class DeleteOp(StepEditOp):
    tag: ClassVar[str] = "delete"
    step_id: UUID


class ReorderOp(StepEditOp):
    tag: ClassVar[str] = "reorder"
    step_id: UUID
    new_index: U32


_OPS_BY_TAG: dict[str, type[StepEditOp]] = {
    op.tag: op for op in (InsertAfterOp, UpdateTitleOp, ReplaceBodyOp, DeleteOp, ReorderOp)
}


def parse_step_edit_op(value: Any) -> StepEditOp:
    """Parse the externally tagged JSON form of a step edit."""
    if isinstance(value, StepEditOp):
        if not value.tag:
            raise ValueError("step edit has no variant")
        return value
    if not isinstance(value, Mapping) or len(value) != 1:
        raise ValueError("step edit must be an object with exactly one variant key")
    ((tag, fields),) = value.items()
    op_type = _OPS_BY_TAG.get(tag)
    if op_type is None:
        raise ValueError(f"unknown step edit variant: {tag!r}")
    return op_type.model_validate(fields)


def _serialize_step_edit_op(value: StepEditOp) -> dict:
    return value.to_json_value()


StepEditOpField = Annotated[
    StepEditOp, PlainValidator(parse_step_edit_op), PlainSerializer(_serialize_step_edit_op)
]


class StepsApplyEditResponse(_Model):
    head_seq: I64
    applied: StrictBool


class StepsValidateExportResponse(_Model):
    schema_valid: StrictBool
    evidence_valid: StrictBool
    errors: list[StrictStr]


class AnchorsListResponse(_Model):
    anchors: list[AnchorCandidate]


class AnchorsManualSetResponse(_Model):
    anchor: AnchorCandidate


class AnchorsDebugResponse(_Model):
    checks: list[StrictStr]


class ExportWarning(_Model):
    code: StrictStr
    message: StrictStr


class ExportResult(_Model):
    export_id: UUID
    output_path: StrictStr
    bundle_hash: StrictStr
    warnings: list[ExportWarning]


class TutorialValidateExportResponse(_Model):
    allowed: StrictBool
    reasons: list[StrictStr]


class ProofViewResponse(_Model):
    steps: list[Step]
    evidence: EvidenceSet
    warnings: list[ExportWarning]


class RunbookDetail(_Model):
    runbook_id: UUID
    title: StrictStr
    steps: list[Step]


class VerifierSpec(_Model):
    verifier_id: StrictStr
    kind: StrictStr
    timeout_secs: U32
    command_allowlist: list[StrictStr]


class VerifierListResponse(_Model):
    verifiers: list[VerifierSpec]


class VerifierResultDetail(_Model):
    run_id: UUID
    verifier_id: StrictStr
    status: StrictStr
    result_asset: AssetRef
    logs_asset: Optional[AssetRef] = None


class ModelProfile(_Model):
    model_id: StrictStr
    provider: StrictStr
    label: StrictStr
    digest: StrictStr


class ModelsListResponse(_Model):
    models: list[ModelProfile]


class ModelsRemoveResponse(_Model):
    removed: StrictBool


class ModelRoles(_Model):
    tutorial_generation: Optional[StrictStr] = None
    screen_explainer: Optional[StrictStr] = None
    anchor_grounding: Optional[StrictStr] = None


class ModelRolesUpdate(_Model):
    tutorial_generation: Optional[StrictStr] = None
    screen_explainer: Optional[StrictStr] = None
    anchor_grounding: Optional[StrictStr] = None


class OllamaListResponse(_Model):
    models: list[StrictStr]


class BenchRecord(_Model):
    bench_id: UUID
    model_id: StrictStr
    score: I32
    created_at: AwareDatetime


class BenchListResponse(_Model):
    benches: list[BenchRecord]


class AgentPipelinesListResponse(_Model):
    pipelines: list[StrictStr]


class AgentPipelineReportResponse(_Model):
    run_id: UUID
    diagnostics: list[StrictStr]


class ExportsListResponse(_Model):
    exports: list[ExportResult]


class ExportVerifyResponse(_Model):
    valid: StrictBool
    issues: list[StrictStr]


class TimelineKeyframesResponse(_Model):
    keyframes: list[TimelineKeyframe]


class TimelineEventsResponse(_Model):
    events: list[TimelineEvent]


PayloadT = TypeVar("PayloadT")


class EventStreamEnvelope(_Model, Generic[PayloadT]):
    stream_seq: U64
    sent_at: AwareDatetime
    payload: PayloadT


class JobProgressEvent(_Model):
    job_id: UUID
    stage: StrictStr
    pct: U8
    counters: JobCounters


class JobStatusEvent(_Model):
    job_id: UUID
    status: JobStatus


class CaptureStatusEvent(_Model):
    state: CaptureState
    session_id: Optional[UUID] = None


class StepModel(_Model):
    schema_version: U32
    steps: list[Step]