# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""FastAPI wiring for audit entry construction.

``add_audit_trails`` registers one ``AuditOptions`` value and one
``AuditEntryFactory`` on the application state; route handlers receive them
through the ``get_audit_options`` and ``get_audit_entry_factory``
dependencies. Registration never replaces an existing factory.
"""

import dataclasses
import logging
from typing import Annotated, Callable, Optional

from fastapi import Depends, FastAPI, Request

from audit_trails.core.audit.options import AuditOptions
from audit_trails.core.audit.services import AuditEntryFactory
from audit_trails.infra.factory import create_audit_entry_factory

logger = logging.getLogger(__name__)

OptionsConfigurator = Callable[[AuditOptions], AuditOptions]


def add_audit_trails(
    app: FastAPI,
    configure: Optional[OptionsConfigurator] = None,
) -> AuditEntryFactory:
    """Register audit options and the entry factory on an application.

    Args:
        app: FastAPI application to wire.
        configure: Optional callback receiving default options and
            returning the options to use (e.g. via ``dataclasses.replace``).

    Returns:
        The registered factory, which is the pre-existing one if the app
        was already wired.
    """
    existing = getattr(app.state, "audit_entry_factory", None)
    if existing is not None:
        logger.debug("Audit entry factory already registered, keeping it")
        return existing

    options = AuditOptions()
    if configure is not None:
        options = configure(options)

    factory = create_audit_entry_factory(options)
    app.state.audit_options = options
    app.state.audit_entry_factory = factory
    logger.info(
        "Audit trails registered (include_stack_trace=%s, max_description_length=%s)",
        options.include_stack_trace,
        options.max_description_length,
    )
    return factory


def configure_from_env(_: AuditOptions) -> AuditOptions:
    """Options configurator reading ``AUDIT_*`` environment variables."""
    return AuditOptions.from_env()


def with_options(**changes) -> OptionsConfigurator:
    """Build a configurator that overrides individual option fields."""

    def _configure(options: AuditOptions) -> AuditOptions:
        return dataclasses.replace(options, **changes)

    return _configure


def get_audit_options(request: Request) -> AuditOptions:
    """Return the registered audit options.

    Raises:
        RuntimeError: If ``add_audit_trails`` was not called for the app.
    """
    options = getattr(request.app.state, "audit_options", None)
    if options is None:
        raise RuntimeError("Audit trails are not registered; call add_audit_trails(app)")
    return options


def get_audit_entry_factory(request: Request) -> AuditEntryFactory:
    """Return the registered audit entry factory.

    Raises:
        RuntimeError: If ``add_audit_trails`` was not called for the app.
    """
    factory = getattr(request.app.state, "audit_entry_factory", None)
    if factory is None:
        raise RuntimeError("Audit trails are not registered; call add_audit_trails(app)")
    return factory


AuditOptionsDep = Annotated[AuditOptions, Depends(get_audit_options)]
AuditEntryFactoryDep = Annotated[AuditEntryFactory, Depends(get_audit_entry_factory)]
