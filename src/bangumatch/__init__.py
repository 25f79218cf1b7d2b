# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""bangumatch - Bangumi episode resolver for series video files."""

from bangumatch.__about__ import __version__

__all__ = ["__version__"]
