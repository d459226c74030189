"""Batch compliance jobs: listing, fetching and creating them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .endpoints import (
    COMPLIANCE_JOB_URL,
    COMPLIANCE_JOBS_URL,
    CREATE_COMPLIANCE_JOB_URL,
    format_endpoint,
)
from .errors import APIResponseError, parse_errors
from .transport import Transport


class ComplianceFieldType(str, Enum):
    """Kind of data a compliance job covers."""

    TWEETS = "tweets"
    USERS = "users"


class ComplianceFieldStatus(str, Enum):
    """Status filter for listing compliance jobs."""

    CREATED = "created"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    COMPLETE = "complete"


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return "" if value is None else str(value)


@dataclass
class ComplianceJob:
    """A single compliance job as described by the API."""

    id: str = ""
    created_at: str = ""
    type: str = ""
    name: str = ""
    upload_url: str = ""
    upload_expires_at: str = ""
    download_url: str = ""
    download_expires_at: str = ""
    status: str = ""
    resumable: bool = False
    error: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ComplianceJob":
        data = data or {}
        return cls(
            id=data.get("id") or "",
            created_at=data.get("created_at") or "",
            type=data.get("type") or "",
            name=data.get("name") or "",
            upload_url=data.get("upload_url") or "",
            upload_expires_at=data.get("upload_expires_at") or "",
            download_url=data.get("download_url") or "",
            download_expires_at=data.get("download_expires_at") or "",
            status=data.get("status") or "",
            resumable=bool(data.get("resumable", False)),
            error=data.get("error") or "",
        )


@dataclass
class ComplianceJobsResponse:
    """Reply of the compliance jobs listing."""

    data: list[ComplianceJob] = field(default_factory=list)
    errors: list[APIResponseError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ComplianceJobsResponse":
        data = data or {}
        return cls(
            data=[ComplianceJob.from_dict(item) for item in data.get("data") or ()],
            errors=parse_errors(data),
        )


@dataclass
class ComplianceJobResponse:
    """Reply of a single compliance job lookup."""

    data: ComplianceJob | None = None
    errors: list[APIResponseError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ComplianceJobResponse":
        data = data or {}
        job = data.get("data")
        return cls(
            data=ComplianceJob.from_dict(job) if job is not None else None,
            errors=parse_errors(data),
        )


@dataclass
class CreateComplianceJobResponse:
    """Reply of creating a compliance job."""

    data: ComplianceJob | None = None
    errors: list[APIResponseError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CreateComplianceJobResponse":
        data = data or {}
        job = data.get("data")
        return cls(
            data=ComplianceJob.from_dict(job) if job is not None else None,
            errors=parse_errors(data),
        )


@dataclass
class ComplianceJobsOption:
    """Query options for listing compliance jobs; ``type`` is required."""

    type: ComplianceFieldType | str = ""
    status: ComplianceFieldStatus | str = ""

    def to_params(self) -> dict[str, str]:
        params = {"type": _text(self.type)}
        if self.status:
            params["status"] = _text(self.status)
        return params


@dataclass
class CreateComplianceJobOption:
    """Body of a compliance job creation request; ``type`` is required."""

    type: ComplianceFieldType | str = ""
    name: str = ""
    resumable: bool = False

    def to_json(self) -> dict[str, Any]:
        body: dict[str, Any] = {"type": _text(self.type)}
        if self.name:
            body["name"] = self.name
        if self.resumable:
            body["resumable"] = True
        return body


def compliance_jobs(
    transport: Transport, option: ComplianceJobsOption | None = None
) -> ComplianceJobsResponse:
    """List recent compliance jobs of the given type."""
    option = option or ComplianceJobsOption()
    if not option.type:
        raise ValueError("compliance jobs: type parameter is required")
    reply = transport.send("GET", COMPLIANCE_JOBS_URL, params=option.to_params())
    result = ComplianceJobsResponse.from_dict(reply.data)
    reply.raise_for_status("compliance jobs", result)
    return result


def compliance_job(transport: Transport, compliance_job_id: int) -> ComplianceJobResponse:
    """Fetch a single compliance job by its ID."""
    url = format_endpoint(COMPLIANCE_JOB_URL, compliance_job_id)
    reply = transport.send("GET", url)
    result = ComplianceJobResponse.from_dict(reply.data)
    reply.raise_for_status("compliance job", result)
    return result


def create_compliance_job(
    transport: Transport, option: CreateComplianceJobOption | None = None
) -> CreateComplianceJobResponse:
    """Create a compliance job."""
    option = option or CreateComplianceJobOption()
    if not option.type:
        raise ValueError("create compliance job: type parameter is required")
    reply = transport.send("POST", CREATE_COMPLIANCE_JOB_URL, json_body=option.to_json())
    result = CreateComplianceJobResponse.from_dict(reply.data)
    reply.raise_for_status("create compliance job", result)
    return result