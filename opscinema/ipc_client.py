"""TypeScript client generation for the locked IPC command surface."""

from __future__ import annotations

from .ipc import IpcCommand, locked_commands

_EMPTY = "Record<string, never>"
_JOB_HANDLE = "{ job_id: string }"
_SESSION_ONLY = "{ session_id: string }"
_SESSION_STEP = "{ session_id: string; step_id: string }"
_SESSION_FRAME = "{ session_id: string; frame_event_id: string }"
_SESSION_QUERY = "{ session_id: string; query: string }"
_MODEL_PROMPT = "{ model_id: string; prompt: string }"

_SETTINGS = (
    "{ offline_mode: boolean; allow_input_capture: boolean; allow_window_metadata: boolean }"
)
_ALLOWLIST = "{ entries: string[] }"
_SESSION_SUMMARY = (
    "{ session_id: string; label: string; created_at: string; closed_at?: string; "
    "head_seq: number; head_hash: string }"
)
_CAPTURE_CONFIG = (
    "{ keyframe_interval_ms: number; include_input: boolean; include_window_meta: boolean }"
)
_CAPTURE_STATUS = (
    "{ state: 'IDLE' | 'CAPTURING' | 'STOPPED'; session_id?: string; started_at?: string }"
)
_BBOX = "{ x: number; y: number; w: number; h: number }"
_LOCATOR = (
    "{ locator_type: string; asset_id?: string; frame_ms?: number; "
    f"bbox_norm?: {_BBOX}; text_offset?: {{ start: number; end: number }}; note?: string }}"
)
_EVIDENCE_SET = (
    "{ evidence: Array<{ evidence_id: string; kind: string; source_id: string; "
    f"locators: Array<{_LOCATOR}> }}> }}"
)
_STEP = (
    "{ step_id: string; title: string; order_index: number; body: { blocks: Array<{ "
    "block_id: string; text: string; provenance: 'human' | 'generated'; "
    "evidence_refs: string[] }> }; risk_tags: string[]; branch_label?: string }"
)
_ANCHOR = (
    "{ anchor_id: string; step_id: string; kind: string; target_signature: string; "
    f"confidence: number; degraded: boolean; locators: Array<{_LOCATOR}> }}"
)
_WARNINGS = "Array<{ code: string; message: string }>"
_EXPORT_RESULT = (
    "{ export_id: string; output_path: string; bundle_hash: string; "
    f"warnings: {_WARNINGS} }}"
)
_RUNBOOK = f"{{ runbook_id: string; title: string; steps: Array<{_STEP}> }}"
_MODEL_ROLES = (
    "{ tutorial_generation?: string; screen_explainer?: string; anchor_grounding?: string }"
)
_JOB_STATUS = "'QUEUED' | 'RUNNING' | 'SUCCEEDED' | 'FAILED' | 'CANCELLED'"
_JOB_DETAIL = (
    "{ job_id: string; job_type: string; session_id?: string; "
    f"status: {_JOB_STATUS}; created_at: string; started_at?: string; ended_at?: string; "
    "progress?: { stage: string; pct: number; counters: { done: number; total: number } }; "
    "error?: { code: string; message: string; details?: string; recoverable: boolean; "
    "action_hint?: string } }"
)
_FALLBACK = ("JsonObject", "JsonObject")

_COMMAND_TYPES: dict[str, tuple[str, str]] = {
    "app_get_build_info": (
        _EMPTY,
        "{ app_name: string; app_version: string; commit: string; built_at: string }",
    ),
    "app_get_permissions_status": (
        _EMPTY,
        "{ screen_recording: boolean; accessibility: boolean; full_disk_access: boolean }",
    ),
    "settings_get": (_EMPTY, _SETTINGS),
    "settings_set": (_SETTINGS, _SETTINGS),
    "network_allowlist_get": (_EMPTY, _ALLOWLIST),
    "network_allowlist_set": (_ALLOWLIST, _ALLOWLIST),
    "session_create": (
        "{ label: string; metadata: Record<string, string> }",
        _SESSION_SUMMARY,
    ),
    "session_list": ("{ limit?: number }", f"Array<{_SESSION_SUMMARY}>"),
    "session_get": (
        _SESSION_ONLY,
        f"{{ summary: {_SESSION_SUMMARY}; metadata: Record<string, string> }}",
    ),
    "session_close": (_SESSION_ONLY, _SESSION_SUMMARY),
    "timeline_get_keyframes": (
        "{ session_id: string; start_ms: number; end_ms: number }",
        "{ keyframes: Array<{ frame_event_id: string; frame_ms: number; "
        "asset: { asset_id: string } }> }",
    ),
    "timeline_get_events": (
        "{ session_id: string; after_seq?: number; limit?: number }",
        "{ events: Array<{ seq: number; event_id: string; event_type: string; "
        "frame_ms?: number }> }",
    ),
    "timeline_get_thumbnail": (_SESSION_FRAME, "{ asset_id: string }"),
    "capture_get_config": (_EMPTY, _CAPTURE_CONFIG),
    "capture_set_config": (_CAPTURE_CONFIG, _CAPTURE_CONFIG),
    "capture_start": (_SESSION_ONLY, _CAPTURE_STATUS),
    "capture_stop": (_SESSION_ONLY, _CAPTURE_STATUS),
    "capture_get_status": ("{ session_id?: string }", _CAPTURE_STATUS),
    "ocr_schedule": (
        "{ session_id: string; start_ms?: number; end_ms?: number }",
        _JOB_HANDLE,
    ),
    "ocr_get_status": (_SESSION_ONLY, "{ queued_frames: number; indexed_frames: number }"),
    "ocr_search": (
        _SESSION_QUERY,
        "{ hits: Array<{ frame_ms: number; block_id: string; snippet: string }> }",
    ),
    "ocr_get_blocks_for_frame": (
        _SESSION_FRAME,
        f"{{ blocks: Array<{{ ocr_block_id: string; bbox_norm: {_BBOX}; text: string; "
        "confidence: number; language?: string }> }",
    ),
    "evidence_for_step": (_SESSION_STEP, _EVIDENCE_SET),
    "evidence_find_text": (_SESSION_QUERY, _EVIDENCE_SET),
    "steps_generate_candidates": (_SESSION_ONLY, _JOB_HANDLE),
    "steps_list": (_SESSION_ONLY, f"{{ steps: Array<{_STEP}>; head_seq: number }}"),
    "steps_get": (_SESSION_STEP, f"{{ step: {_STEP}; anchors: Array<{_ANCHOR}> }}"),
    "steps_apply_edit": (
        "{ session_id: string; base_seq: number; op: JsonObject }",
        "{ head_seq: number; applied: boolean }",
    ),
    "steps_validate": (
        _SESSION_ONLY,
        "{ schema_valid: boolean; evidence_valid: boolean; errors: string[] }",
    ),
    "anchors_list_for_step": (_SESSION_STEP, f"{{ anchors: Array<{_ANCHOR}> }}"),
    "anchors_reacquire": (_SESSION_STEP, _JOB_HANDLE),
    "anchors_manual_set": (
        "{ session_id: string; anchor_id: string; "
        f"locators: Array<{_LOCATOR}>; note?: string }}",
        f"{{ anchor: {_ANCHOR} }}",
    ),
    "anchors_debug": (_SESSION_STEP, "{ checks: string[] }"),
    "tutorial_generate": (_SESSION_ONLY, _JOB_HANDLE),
    "tutorial_validate_export": (_SESSION_ONLY, "{ allowed: boolean; reasons: string[] }"),
    "tutorial_export_pack": ("{ session_id: string; output_dir: string }", _EXPORT_RESULT),
    "explain_this_screen": (_SESSION_FRAME, _JOB_HANDLE),
    "evidence_get_coverage": (
        _SESSION_ONLY,
        "{ missing_step_ids: string[]; missing_generated_block_ids: string[]; pass: boolean }",
    ),
    "evidence_for_time_range": (
        "{ session_id: string; start_ms: number; end_ms: number }",
        _EVIDENCE_SET,
    ),
    "proof_get_view": (
        _SESSION_ONLY,
        f"{{ steps: Array<{_STEP}>; evidence: {_EVIDENCE_SET}; warnings: {_WARNINGS} }}",
    ),
    "runbook_create": ("{ session_id: string; title: string }", _RUNBOOK),
    "runbook_update": ("{ runbook_id: string; title?: string }", _RUNBOOK),
    "runbook_export": (
        "{ runbook_id?: string; session_id?: string; output_dir: string }",
        _EXPORT_RESULT,
    ),
    "proof_export_bundle": (
        "{ runbook_id?: string; session_id?: string; output_dir: string }",
        _EXPORT_RESULT,
    ),
    "verifier_list": (
        "{ include_disabled: boolean }",
        "{ verifiers: Array<{ verifier_id: string; kind: string; timeout_secs: number; "
        "command_allowlist: string[] }> }",
    ),
    "verifier_run": ("{ session_id: string; verifier_id: string }", _JOB_HANDLE),
    "verifier_get_result": (
        "{ run_id: string }",
        "{ run_id: string; verifier_id: string; status: string; "
        "result_asset: { asset_id: string }; logs_asset?: { asset_id: string } }",
    ),
    "models_list": (
        "{ include_unhealthy: boolean }",
        "{ models: Array<{ model_id: string; provider: string; label: string; "
        "digest: string }> }",
    ),
    "models_register": (
        "{ provider: string; label: string; model_name: string; digest: string }",
        "{ model_id: string; provider: string; label: string; digest: string }",
    ),
    "models_remove": ("{ model_id: string }", "{ removed: boolean }"),
    "model_roles_set": (_MODEL_ROLES, _MODEL_ROLES),
    "ollama_list": ("{ host?: string }", "{ models: string[] }"),
    "ollama_pull": ("{ host?: string; model: string }", _JOB_HANDLE),
    "ollama_run": (_MODEL_PROMPT, _JOB_HANDLE),
    "mlx_run": (_MODEL_PROMPT, _JOB_HANDLE),
    "bench_run": ("{ model_id: string; benchmark: string }", _JOB_HANDLE),
    "bench_list": (
        "{ limit?: number }",
        "{ benches: Array<{ bench_id: string; model_id: string; score: number; "
        "created_at: string }> }",
    ),
    "model_roles_get": (_EMPTY, _MODEL_ROLES),
    "agent_pipelines_list": (_EMPTY, "{ pipelines: string[] }"),
    "agent_pipeline_run": ("{ session_id: string; pipeline_id: string }", _JOB_HANDLE),
    "agent_pipeline_report": ("{ run_id: string }", "{ run_id: string; diagnostics: string[] }"),
    "exports_list": ("{ session_id?: string }", f"{{ exports: Array<{_EXPORT_RESULT}> }}"),
    "export_verify_bundle": ("{ bundle_path: string }", "{ valid: boolean; issues: string[] }"),
    "jobs_list": (
        f"{{ session_id?: string; status?: {_JOB_STATUS} }}",
        f"{{ jobs: Array<{_JOB_DETAIL}> }}",
    ),
    "jobs_get": ("{ job_id: string }", _JOB_DETAIL),
    "jobs_cancel": ("{ job_id: string }", "{ accepted: boolean }"),
}

_HEADER = (
    "// GENERATED FILE - DO NOT EDIT\n\n"
    "export type JsonObject = { [key: string]: JsonValue };\n"
    "export type JsonValue = string | number | boolean | null | JsonObject | JsonValue[];\n\n"
    "export type AppResult<T> = { ok: true; value: T } | { ok: false; error: AppError };\n"
    "export type AppErrorCode =\n"
    "  | 'PERMISSION_DENIED'\n  | 'VALIDATION_FAILED'\n  | 'NOT_FOUND'\n  | 'CONFLICT'\n"
    "  | 'POLICY_BLOCKED'\n  | 'NETWORK_BLOCKED'\n  | 'EXPORT_GATE_FAILED'\n"
    "  | 'PROVIDER_SCHEMA_INVALID'\n  | 'IO'\n  | 'DB'\n  | 'JOB_CANCELLED'\n"
    "  | 'UNSUPPORTED'\n  | 'INTERNAL';\n"
    "export interface AppError { code: AppErrorCode; message: string; details?: string; "
    "recoverable: boolean; action_hint?: string; }\n\n"
)

_CLIENT_INTERFACE = (
    "\nexport interface IpcClient {\n"
    "  invoke<TReq, TRes>(command: IpcCommand, payload: TReq): Promise<AppResult<TRes>>;\n"
    "}\n"
)


def locked_command_names() -> list[str]:
    """Wire names of every locked command, in locked order."""
    return [command.as_str() for command in locked_commands()]


def command_types(command: str | IpcCommand) -> tuple[str, str]:
    """TypeScript request and response types for a command.

    Unknown commands map to the generic ``JsonObject`` pair.
    """
    name = command.value if isinstance(command, IpcCommand) else command
    return _COMMAND_TYPES.get(name, _FALLBACK)


def generate_typescript_client() -> str:
    """Render the TypeScript client for the locked command list."""
    names = locked_command_names()
    parts = [_HEADER, "export type IpcCommand =\n"]
    last = len(names) - 1
    parts.extend(
        f"  '{name}'{';' if index == last else ' |'}\n" for index, name in enumerate(names)
    )
    parts.append(_CLIENT_INTERFACE)

    parts.append("\nexport interface IpcRequestMap {\n")
    parts.extend(f"  '{name}': {command_types(name)[0]};\n" for name in names)
    parts.append("}\n")

    parts.append("\nexport interface IpcResponseMap {\n")
    parts.extend(f"  '{name}': {command_types(name)[1]};\n" for name in names)
    parts.append("}\n")

    parts.append("\nexport interface GeneratedIpcClient {\n")
    parts.extend(
        f"  {name}(payload: IpcRequestMap['{name}']): "
        f"Promise<AppResult<IpcResponseMap['{name}']>>;\n"
        for name in names
    )
    parts.append("}\n")

    parts.append("\nexport function bindGeneratedClient(client: IpcClient): GeneratedIpcClient {\n")
    parts.append("  return {\n")
    parts.extend(
        f"    {name}: (payload: IpcRequestMap['{name}']) => "
        f"client.invoke<IpcRequestMap['{name}'], IpcResponseMap['{name}']>('{name}', payload),\n"
        for name in names
    )
    parts.append("  };\n")
    parts.append("}\n")
    return "".join(parts)