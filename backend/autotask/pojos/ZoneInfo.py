"""
POJO for the zone discovery response.
"""
from dataclasses import dataclass
from typing import Any, Dict

from framework.APIErrors import DecodeError


@dataclass
class ZoneInfo:
    """
    Regional cluster serving an Autotask account.

    url is the zone's REST root, e.g. https://webservices2.autotask.net/ATServicesRest/
    """
    zoneName: str
    url: str
    webUrl: str = ""
    ci: int = 0

    @staticmethod
    def fromAPIResponse(data: Dict[str, Any]) -> 'ZoneInfo':
        if not isinstance(data, dict) or not data.get('url'):
            raise DecodeError(f"zone information response has no url: {data!r}")
        return ZoneInfo(
            zoneName=data.get('zoneName', ''),
            url=data['url'],
            webUrl=data.get('webUrl', ''),
            ci=int(data.get('ci') or 0)
        )

    def toDict(self) -> Dict[str, Any]:
        return {
            'zoneName': self.zoneName,
            'url': self.url,
            'webUrl': self.webUrl,
            'ci': self.ci
        }
