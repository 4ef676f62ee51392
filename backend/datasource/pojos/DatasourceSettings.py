"""
POJO for one datasource instance's settings, read from Grafana's plugin context.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from autotask.Constants import DEFAULT_WEBSERVICES_URL
from framework.APIErrors import ConfigError


@dataclass
class DatasourceSettings:
    """
    Non-secret fields come from jsonData, credentials from decryptedSecureJsonData:

        {
            "uid": "autotask-prod",
            "url": "",
            "updated": "2024-05-01T10:00:00Z",
            "jsonData": {"username": "api@example.com", "url": "https://webservices.autotask.net"},
            "decryptedSecureJsonData": {"secret": "...", "integrationCode": "..."}
        }
    """
    uid: str
    username: str
    secret: str
    integrationCode: str
    url: str = DEFAULT_WEBSERVICES_URL
    updated: Optional[str] = None

    def __repr__(self) -> str:
        return f"DatasourceSettings(uid={self.uid!r}, username={self.username!r}, url={self.url!r})"

    def validate(self):
        if not self.uid:
            raise ConfigError("uid", "datasource uid is required")
        if not self.username:
            raise ConfigError("username")
        if not self.secret:
            raise ConfigError("secret")
        if not self.integrationCode:
            raise ConfigError("integrationCode", "integration code is required")

    @staticmethod
    def fromInstanceSettings(instanceSettings: Optional[Dict[str, Any]]) -> 'DatasourceSettings':
        if not isinstance(instanceSettings, dict):
            raise ConfigError("dataSourceInstanceSettings")

        jsonData = instanceSettings.get('jsonData') or {}
        secureData = instanceSettings.get('decryptedSecureJsonData') or {}
        updated = instanceSettings.get('updated')

        settings = DatasourceSettings(
            uid=str(instanceSettings.get('uid') or ''),
            username=(jsonData.get('username') or '').strip(),
            secret=secureData.get('secret') or '',
            integrationCode=secureData.get('integrationCode') or '',
            url=jsonData.get('url') or instanceSettings.get('url') or DEFAULT_WEBSERVICES_URL,
            updated=str(updated) if updated is not None else None
        )
        settings.validate()
        return settings

    @staticmethod
    def fromPluginContext(pluginContext: Optional[Dict[str, Any]]) -> 'DatasourceSettings':
        if not isinstance(pluginContext, dict):
            raise ConfigError("pluginContext")
        return DatasourceSettings.fromInstanceSettings(pluginContext.get('dataSourceInstanceSettings'))
