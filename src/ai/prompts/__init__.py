"""Prompts do chat de documentos.

Arquivos:
- chat_policy.py: política por modo e regras de intake (YAML)
- gate_instructions.py: gate de geração e regra do primeiro turno (YAML)
- system_rules.py: composição do bloco de regras do sistema
- message_builder.py: lista estrita de mensagens (regras → documento → histórico → usuário)
- summary_block.py: resumo localizado antes da confirmação

Textos: ai/prompts/yaml/*.yaml
"""

from ai.prompts.chat_policy import get_chat_policy, get_intake_rules
from ai.prompts.gate_instructions import build_gate_instruction, get_create_document_phrase
from ai.prompts.message_builder import (
    TRUNCATION_MARKER,
    build_document_block,
    build_strict_messages,
)
from ai.prompts.summary_block import build_summary_block, extract_document_data
from ai.prompts.system_rules import build_system_rules

__all__ = [
    "TRUNCATION_MARKER",
    "build_document_block",
    "build_gate_instruction",
    "build_strict_messages",
    "build_summary_block",
    "build_system_rules",
    "extract_document_data",
    "get_chat_policy",
    "get_create_document_phrase",
    "get_intake_rules",
]
