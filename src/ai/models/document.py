"""Dados de documento: resumo para confirmação e rascunho extraído."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentSummary(BaseModel):
    """Resumo efêmero construído antes de pedir confirmação ao usuário."""

    model_config = ConfigDict(extra="ignore")

    sender_name: str | None = None
    sender_address: str | None = None
    recipient_name: str | None = None
    recipient_address: str | None = None
    subject: str | None = None
    date: str | None = None
    reference: str | None = None
    main_content: str | None = None


class SenderProfile(BaseModel):
    """Perfil do remetente enviado pelo frontend."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)

    sender_full_name: str | None = None
    full_name: str | None = None
    sender_address: str | None = None
    address: str | None = None
    sender_postal_code: str | None = None
    postal_code: str | None = None
    sender_city: str | None = None
    city: str | None = None


class CaseContext(BaseModel):
    """Metadados do caso (fascicolo/Vorgang) já carregados pelo chamador."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)

    title: str | None = None
    authority: str | None = None
    aktenzeichen: str | None = None
    deadline: str | None = None


@dataclass(frozen=True, slots=True)
class DraftExtraction:
    """Rascunho formal extraído da resposta do modelo.

    Atributos:
        draft_ready: True apenas quando há carta formal completa
        draft: Corpo da carta (None se não pronta)
        title: Assunto extraído da linha Betreff/Oggetto/Subject
    """

    draft_ready: bool = False
    draft: str | None = None
    title: str | None = None
