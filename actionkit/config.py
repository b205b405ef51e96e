"""
Configuration constants, environment variables, and feature flags.

This is a leaf module with no internal dependencies.
"""

import os
import re

# =============================================================================
# Action Naming
# =============================================================================

# Descriptor names are "{provider}{separator}{action}"
ACTION_NAME_SEPARATOR = os.environ.get("ACTIONKIT_NAME_SEPARATOR", "_")
MAX_ACTION_NAME_LENGTH = 64
MAX_PROVIDER_NAME_LENGTH = 64
ACTION_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")

# =============================================================================
# Output
# =============================================================================

QUIET = os.environ.get("ACTIONKIT_QUIET", "").strip().lower() in ("1", "true", "yes")
LOG_PREFIX = "[ActionKit]"

# =============================================================================
# MCP Adapter
# =============================================================================

MCP_SERVER_NAME = os.environ.get("ACTIONKIT_MCP_NAME", "actionkit_mcp")
MCP_INSTRUCTIONS = """\
You are connected to an ActionKit tool server. Every tool is an action exposed \
by an action provider and takes a single `params` object.

- Tool names are "<provider>_<action>". The provider prefix tells you which \
integration the tool belongs to.
- Inputs are validated strictly: unknown fields are rejected and every field \
description states its constraints. Fix the reported field and retry.
- Tools that need the wallet use the wallet configured for this server; you \
never pass wallet details yourself.
- The tool list follows the active network. Tools of providers that do not \
support the current network are hidden.\
"""
