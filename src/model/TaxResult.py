from dataclasses import dataclass

@dataclass
class TaxResult:
    totalTax: float
    effectiveRate: float
    marginalRate: float = 0.0
