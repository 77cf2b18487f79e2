"""Policy constants and Flask configuration defaults."""

# Solver / time-series policy
MAX_PROJECTION_MONTHS = 1200  # 100 years
MAX_TRAJECTORY_YEARS = 50

# Input validation ranges
CURRENT_AGE_RANGE = (18, 100)
RETIREMENT_AGE_MAX = 120
RETURN_RATE_MAX = 0.30
WITHDRAWAL_RATE_MAX = 0.10
# log of the largest compounding factor a target may use (floats overflow near 709)
GROWTH_FACTOR_LOG_LIMIT = 700.0
OVERRIDE_MULTIPLIER_MAX = 100.0

# Comparison table: (label, multiplier, fixed monthly amount)
DEFAULT_SCENARIOS = [
    ("Coast FIRE (Current Plan)", 1.0, None),
    ("Aggressive Savings (+50%)", 1.5, None),
    ("Conservative Savings (-25%)", 0.75, None),
    ("Minimal Savings ($500/mo)", None, 500.0),
]

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CNY": "¥",
    "JPY": "¥",
    "CAD": "CAD$",
    "AUD": "AUD$",
}
DEFAULT_CURRENCY = "USD"

# Form defaults (rates as fractions)
DEFAULT_PARAMETERS = {
    "currentAge": 30,
    "retirementAge": 65,
    "currentSavings": 50000.0,
    "monthlyContribution": 1000.0,
    "annualExpenses": 40000.0,
    "returnRate": 0.07,
    "inflationRate": 0.03,
    "safeWithdrawalRate": 0.04,
}


class DefaultConfig:
    """Flask settings; override with COASTFIRE_* environment variables."""

    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
