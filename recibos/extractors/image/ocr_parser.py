"""
OCR text parser: free text recognised from a photographed payroll table
→ canonical employee records.

Line heuristics:
- a line opening with two or more capitalised words starts a new employee
- the first number of a line is classified by keyword (base, extra, bonus,
  health); without a keyword, and while the base salary is still unset,
  numbers are taken positionally in that order (a base read as 0 counts
  as unset)
- extra and health fold into ``beneficios``, bonus into ``bonus5``

Misclassification (wrong field, merged employees) is not detected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from recibos.ir import ColumnMapping, EmployeeRecord, empty_mapping
from recibos.normalize import Number, derive_total, parse_ocr_number

_UPPER = "A-ZÁÉÍÓÚÂÊÔÃÕÇÀÜ"
_LOWER = "a-záéíóúâêôãõçàü"
NAME_LINE_RE = re.compile(rf"^([{_UPPER}][{_LOWER}]+(?:\s+[{_UPPER}][{_LOWER}]+)+)")
NUMBER_RE = re.compile(r"\d+[.,]?\d*")

# (category, keywords) tested in order on the lower-cased line
CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("base", ("base", "salário", "salario")),
    ("extra", ("extra", "adicional")),
    ("bonus", ("bonus", "bônus", "gratificação", "gratificacao")),
    ("health", ("saúde", "saude", "plano")),
)
POSITIONAL_ORDER = ("base", "extra", "bonus", "health")

OCR_HEADERS = ["Nome", "Salário Base", "Benefícios", "Bônus"]
OCR_MAPPING_LABELS: Dict[str, str] = {
    "name": "Nome (detectado via OCR)",
    "baseSalary": "Salário Base (detectado)",
    "beneficios": "Extra + Saúde (detectado)",
    "bonus5": "Bônus (detectado)",
}


@dataclass
class _Entry:
    name: str
    base: Optional[Number] = None
    extra: Optional[Number] = None
    bonus: Optional[Number] = None
    health: Optional[Number] = None

    def to_record(self) -> EmployeeRecord:
        fields: Dict[str, Number] = {}
        if self.base is not None:
            fields["baseSalary"] = self.base
        if self.extra is not None or self.health is not None:
            fields["beneficios"] = (self.extra or 0) + (self.health or 0)
        if self.bonus is not None:
            fields["bonus5"] = self.bonus
        fields["total"] = derive_total(fields)
        return EmployeeRecord.model_validate({"name": self.name, **fields})


def ocr_mapping() -> ColumnMapping:
    """Fixed mapping description for the OCR path (there are no real columns)."""
    mapping = empty_mapping()
    mapping.update(OCR_MAPPING_LABELS)
    return mapping


def classify_line(line: str) -> Optional[str]:
    lower = line.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in lower for k in keywords):
            return category
    return None


def parse_ocr_text(text: str) -> List[EmployeeRecord]:
    """Segment recognised text into canonical records, in reading order."""
    lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
    entries: List[_Entry] = []
    current: Optional[_Entry] = None

    for line in lines:
        name_match = NAME_LINE_RE.match(line)
        if name_match:
            if current is not None and current.name:
                entries.append(current)
            current = _Entry(name=name_match.group(1))

        numbers = NUMBER_RE.findall(line)
        if not numbers or current is None:
            continue

        category = classify_line(line)
        if category is not None:
            setattr(current, category, parse_ocr_number(numbers[0]))
        elif not current.base:
            for attr, raw in zip(POSITIONAL_ORDER, numbers):
                setattr(current, attr, parse_ocr_number(raw))

    if current is not None and current.name:
        entries.append(current)

    return [entry.to_record() for entry in entries]
