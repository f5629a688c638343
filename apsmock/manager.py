"""The set of in-memory stores behind a stateful mock server."""

from __future__ import annotations

from dataclasses import dataclass, field

from apsmock.buckets import BucketState
from apsmock.issues import IssuesState
from apsmock.objects import ObjectState
from apsmock.projects import ProjectState
from apsmock.translations import TranslationState
from apsmock.webhooks import WebhooksState


@dataclass
class StateManager:
    """Holds one store per APS resource kind.

    Shallow copies share the same stores.
    """

    buckets: BucketState = field(default_factory=BucketState)
    objects: ObjectState = field(default_factory=ObjectState)
    projects: ProjectState = field(default_factory=ProjectState)
    translations: TranslationState = field(default_factory=TranslationState)
    issues: IssuesState = field(default_factory=IssuesState)
    webhooks: WebhooksState = field(default_factory=WebhooksState)