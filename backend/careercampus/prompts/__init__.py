"""Prompt templates for LLM interactions.

Modules:
    career: Career paths, resume draft, and ATS analysis prompts
"""
