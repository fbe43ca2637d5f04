"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Mon Oct 13 2025
# SPDX-License-Identifier: MIT

Errors raised by the entity store.

Only fetch-then-mutate operations raise. A plain lookup that finds nothing
returns ``None`` (or an empty list), and ``mark_notification_as_read`` on an
unknown id does nothing at all. That last case is a known asymmetry with the
update operations and is kept as is.
"""


class AidlinkError(Exception):
    """Base class for errors raised by aidlink."""


class NotFoundError(AidlinkError, LookupError):
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
