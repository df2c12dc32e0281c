"""
Representação intermediária (Intermediate Representation Module)
================================================================

Estruturas de dados compartilhadas pelos extratores e pelo gerador de
recibos: EmployeeRecord (registro canônico), ColumnMapping e ParseResult.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Tipo de origem do arquivo de entrada
SourceType = Literal["excel", "image"]

# Valor de um campo: número quando o texto é numérico, senão o texto original
FieldValue = Union[int, float, str]

# Campos canônicos, na ordem da tabela de detecção de colunas
CANONICAL_FIELDS = (
    "name",
    "diasDiurnos",
    "diasNoturnos",
    "baseSalary",
    "beneficios",
    "bonus5",
    "descontos",
    "total",
)

# campo canônico -> rótulo de origem detectado (None = não encontrado)
ColumnMapping = Dict[str, Optional[str]]


def empty_mapping() -> ColumnMapping:
    """Mapeamento com todos os campos canônicos como "não encontrado"."""
    return {field: None for field in CANONICAL_FIELDS}


class EmployeeRecord(BaseModel):
    """
    Registro canônico de um funcionário, independente do formato de origem.

    Atributos (chave JSON entre parênteses):
        name (name): nome do funcionário, obrigatório e não vazio
        dias_diurnos (diasDiurnos): dias em turno diurno
        dias_noturnos (diasNoturnos): dias em turno noturno
        base_salary (baseSalary): salário base
        beneficios (beneficios): benefícios
        bonus5 (bonus5): bônus de 5%
        descontos (descontos): descontos
        total (total): valor final; derivado quando ausente na origem

    O registro é imutável depois de construído.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    dias_diurnos: Optional[FieldValue] = Field(default=None, alias="diasDiurnos")
    dias_noturnos: Optional[FieldValue] = Field(default=None, alias="diasNoturnos")
    base_salary: Optional[FieldValue] = Field(default=None, alias="baseSalary")
    beneficios: Optional[FieldValue] = None
    bonus5: Optional[FieldValue] = None
    descontos: Optional[FieldValue] = None
    total: Optional[FieldValue] = None

    def to_payload(self) -> Dict[str, Any]:
        """Dicionário JSON com as chaves originais, sem campos ausentes."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ParseResult(BaseModel):
    """
    Resultado da extração de um arquivo.

    Atributos:
        source_type: "excel" ou "image"
        headers: cabeçalhos da planilha (ou rótulos fixos no caminho OCR)
        mapping: campo canônico -> cabeçalho detectado
        data: registros normalizados, todos com nome
        warnings: avisos não fatais (ex.: campos sem coluna)
    """

    source_type: SourceType
    headers: List[str]
    mapping: ColumnMapping
    data: List[EmployeeRecord]
    warnings: List[str] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "source_type": self.source_type,
            "headers": list(self.headers),
            "mapping": dict(self.mapping),
            "data": [record.to_payload() for record in self.data],
            "warnings": list(self.warnings),
        }
