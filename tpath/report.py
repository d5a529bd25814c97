"""
JSON report models for the command line.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Mode = Literal["absolute", "relative", "basedir"]


class ResolveReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: str
    from_: Optional[str] = Field(default=None, alias="from")
    mode: Mode
    basedir: str
    result: Optional[str]


class NamespacesList(BaseModel):
    basedir: str
    namespaces: Dict[str, str]


class AliasesList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    basedir: str
    alias_types: List[str] = Field(alias="aliasTypes")
    aliases: Dict[str, Dict[str, str]]


__all__ = ["Mode", "ResolveReport", "NamespacesList", "AliasesList"]
