# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""OAuth / OpenID Connect identity server settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

IDENTITY_SERVER_URL_ENV_KEY = "IDENTITY_SERVER_URL"
IDENTITY_SERVER_REALM_ENV_KEY = "IDENTITY_SERVER_REALM"
IDENTITY_SERVER_AUDIENCE_ENV_KEY = "IDENTITY_SERVER_AUDIENCE"
IDENTITY_SERVER_ISSUER_ENV_KEY = "IDENTITY_SERVER_ISSUER"
IDENTITY_SERVER_CLIENT_ID_ENV_KEY = "IDENTITY_SERVER_CLIENT_ID"
IDENTITY_SERVER_CLIENT_SECRET_ENV_KEY = "IDENTITY_SERVER_CLIENT_SECRET"
IDENTITY_SERVER_GRANT_TYPE_ENV_KEY = "IDENTITY_SERVER_GRANT_TYPE"


@dataclass
class IdentityServerConfig:
    """Identity provider (Auth0, Keycloak, ...) client settings.

    Attributes:
        url: Identity server URL (IDENTITY_SERVER_URL)
        realm: Realm; the domain, for Auth0 (IDENTITY_SERVER_REALM)
        audience: OAuth audience (IDENTITY_SERVER_AUDIENCE)
        issuer: Token issuer (IDENTITY_SERVER_ISSUER)
        client_id: OAuth client ID (IDENTITY_SERVER_CLIENT_ID)
        client_secret: OAuth client secret (IDENTITY_SERVER_CLIENT_SECRET)
        grant_type: OAuth grant type (IDENTITY_SERVER_GRANT_TYPE)
    """

    url: str = ""
    realm: str = ""
    audience: str = ""
    issuer: str = ""
    client_id: str = ""
    client_secret: str = ""
    grant_type: str = "client_credentials"

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "IdentityServerConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.url = provider.get_str(IDENTITY_SERVER_URL_ENV_KEY, cfg.url)
        cfg.realm = provider.get_str(IDENTITY_SERVER_REALM_ENV_KEY, cfg.realm)
        cfg.audience = provider.get_str(IDENTITY_SERVER_AUDIENCE_ENV_KEY, cfg.audience)
        cfg.issuer = provider.get_str(IDENTITY_SERVER_ISSUER_ENV_KEY, cfg.issuer)
        cfg.client_id = provider.get_str(IDENTITY_SERVER_CLIENT_ID_ENV_KEY, cfg.client_id)
        cfg.client_secret = provider.get_str(IDENTITY_SERVER_CLIENT_SECRET_ENV_KEY, cfg.client_secret)
        cfg.grant_type = provider.get_str(IDENTITY_SERVER_GRANT_TYPE_ENV_KEY, cfg.grant_type)

        return cfg
