# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import logging
from dataclasses import dataclass
from typing import Annotated, Optional

from cyclopts import Group, Parameter, validators

from patternforge.utils import setup_logging

verbosity_group = Group(
    "Verbosity",
    default_parameter=Parameter(negative=""),  # no --no- flags
    validator=validators.MutuallyExclusive(),
)


@Parameter(name="*")
@dataclass
class CommonParameters:
    quiet: Annotated[
        bool,
        Parameter(group=verbosity_group, help="Suppress all output except errors."),
    ] = False
    verbose: Annotated[
        bool, Parameter(group=verbosity_group, help="Print additional information.")
    ] = False


def set_logging_level(common: Optional[CommonParameters] = None) -> int:
    if common and common.quiet:
        level = logging.ERROR
    elif common and common.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    setup_logging(level)
    return level
