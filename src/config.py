from pydantic_settings import BaseSettings

from src.models.mortgage import LoanInputs


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # CLI
    api_base_url: str = "http://localhost:8000"

    # Calculator starting values
    default_home_price: float = 300000
    default_down_payment: float = 60000
    default_interest_rate_pct: float = 6.5
    default_term_years: int = 30

    # Upper bound on rows returned by the schedule endpoint (50yr term = 600)
    max_schedule_payments: int = 1200

    def default_loan_inputs(self) -> LoanInputs:
        return LoanInputs(
            home_price=self.default_home_price,
            down_payment=self.default_down_payment,
            annual_interest_rate_pct=self.default_interest_rate_pct,
            term_years=self.default_term_years,
        )


settings = Settings()
