"""Pydantic models describing the JSON report files."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReportBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class IdentityPayload(ReportBaseModel):
    phone: str
    name: str


class IdentityList(ReportBaseModel):
    count: int
    identities: list[IdentityPayload] = Field(default_factory=list["IdentityPayload"])


class FrequencyEntry(ReportBaseModel):
    key: str
    count: int


class DuplicateReport(ReportBaseModel):
    master_phones: list[FrequencyEntry] = Field(default_factory=list["FrequencyEntry"])
    compare_phones: list[FrequencyEntry] = Field(default_factory=list["FrequencyEntry"])
    missing_names: list[FrequencyEntry] = Field(default_factory=list["FrequencyEntry"])


class FailurePayload(ReportBaseModel):
    path: str
    corpus: str
    message: str


class RunStatsPayload(ReportBaseModel):
    total_files: int
    processed_files: int
    skipped_files: int
    errors: int
    total_master: int
    unique_master: int
    total_compare: int
    unique_compare: int
    missing: int
    failures: list[FailurePayload] = Field(default_factory=list["FailurePayload"])
