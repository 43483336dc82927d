"""Núcleo del traductor: tokenizer, resolver, expander y orquestador."""

from __future__ import annotations
