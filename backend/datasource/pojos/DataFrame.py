"""
POJOs for columnar result tables in Grafana's data-frame JSON shape.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

# Frame field type -> (Grafana field type, Go-side frame type)
FIELD_TYPES = {
    'int64': ('number', 'int64'),
    'string': ('string', 'string'),
    'bool': ('boolean', 'bool'),
    'time': ('time', 'time.Time'),
}


@dataclass
class Field:
    name: str
    type: str
    values: List[Any] = field(default_factory=list)
    nullable: bool = False

    def schemaDict(self) -> Dict[str, Any]:
        fieldType, frameType = FIELD_TYPES[self.type]
        typeInfo: Dict[str, Any] = {'frame': frameType}
        if self.nullable:
            typeInfo['nullable'] = True
        return {'name': self.name, 'type': fieldType, 'typeInfo': typeInfo}


@dataclass
class DataFrame:
    name: str
    fields: List[Field] = field(default_factory=list)

    @property
    def rowCount(self) -> int:
        return len(self.fields[0].values) if self.fields else 0

    def getField(self, name: str) -> Field:
        for frameField in self.fields:
            if frameField.name == name:
                return frameField
        raise KeyError(name)

    def toDict(self) -> Dict[str, Any]:
        return {
            'schema': {
                'name': self.name,
                'fields': [frameField.schemaDict() for frameField in self.fields]
            },
            'data': {
                'values': [list(frameField.values) for frameField in self.fields]
            }
        }
