"""Errors raised by the week conversion utilities."""
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-12
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------


class InvalidArgument(ValueError):
    """Raised when a week number, year, token or policy name is not acceptable."""
