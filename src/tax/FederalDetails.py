from model.TaxResult import TaxResult

STANDARD_DEDUCTION = 14600.0

BRACKETS = [
	{"maxIncome": 11600.0, "rate": 0.10},
	{"maxIncome": 47150.0, "rate": 0.12},
	{"maxIncome": 100525.0, "rate": 0.22},
	{"maxIncome": 191950.0, "rate": 0.24},
	{"maxIncome": 243725.0, "rate": 0.32},
	{"maxIncome": 609350.0, "rate": 0.35},
	{"maxIncome": float("inf"), "rate": 0.37},
]


def progressive_tax(taxable_income: float, brackets: list) -> float:
	"""
	Walks the brackets from the bottom up, taxing the slice of income that
	falls between each bracket's floor (the previous maxIncome) and its ceiling.
	"""
	tax = 0.0
	for i, b in enumerate(brackets):
		bracket_floor = 0 if i == 0 else brackets[i - 1]["maxIncome"]
		bracket_ceiling = b["maxIncome"]
		if taxable_income <= bracket_floor:
			break
		tax += (min(taxable_income, bracket_ceiling) - bracket_floor) * b["rate"]
	return tax


def marginal_rate(taxable_income: float, brackets: list) -> float:
	"""Returns the rate of the bracket the last unit of taxable income falls into."""
	for b in brackets:
		if taxable_income <= b["maxIncome"]:
			return b["rate"]
	return brackets[-1]["rate"]


class FederalDetails:
	def __init__(self, standard_deduction: float = STANDARD_DEDUCTION, brackets: list = None):
		"""
		standard_deduction: amount subtracted from gross income before brackets apply
		brackets: list of {"maxIncome", "rate"} dicts ordered by maxIncome, rate as a fraction
		"""
		self.standard_deduction = standard_deduction
		self.brackets = []
		for b in (brackets if brackets is not None else BRACKETS):
			rate = b["rate"]
			if rate > 1:
				rate = rate / 100.0
			self.brackets.append({"maxIncome": b["maxIncome"], "rate": rate})

	def taxBurden(self, income: float) -> TaxResult:
		"""
		Returns a TaxResult with the total tax and effective rate (percent) for a gross income.
		"""
		if income <= 0:
			return TaxResult(totalTax=0.0, effectiveRate=0.0)
		taxable = max(0.0, income - self.standard_deduction)
		tax = progressive_tax(taxable, self.brackets)
		return TaxResult(
			totalTax=tax,
			effectiveRate=(tax / income) * 100,
			marginalRate=marginal_rate(taxable, self.brackets),
		)
