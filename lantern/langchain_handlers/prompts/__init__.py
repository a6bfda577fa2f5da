"""Prompt templates for Lantern."""

from lantern.langchain_handlers.prompts.augmentation_prompts import (
    AugmentationPrompts,
    detect_contradictions,
)

__all__ = ["AugmentationPrompts", "detect_contradictions"]
