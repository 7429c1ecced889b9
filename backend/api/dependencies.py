"""Shared dependencies for API routes."""

from services.career.classifier import CareerClassifier
from services.career.taxonomy import Taxonomy
from services.pipeline.registry import get_stage


def get_classifier() -> CareerClassifier:
    return get_stage("classifier").engine


def get_taxonomy() -> Taxonomy:
    return get_stage("categorizer").taxonomy
