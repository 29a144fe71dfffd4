"""
Tests for deposit, loan and PPF calculations.
"""

import dataclasses
import math

import pytest

from fincalc.calculations import InvalidInputError
from fincalc.calculations.deposits import calculate_fd, calculate_rd
from fincalc.calculations.loans import (
    calculate_emi,
    calculate_loan,
    calculate_monthly_payment,
    sample_schedule,
)
from fincalc.calculations.ppf import PPF_ANNUAL_RATE, calculate_ppf


class TestFixedDeposit:
    """Test fixed deposit maturity."""

    def test_quarterly_compounding(self):
        """1 lakh at 7% for 5 years compounded quarterly."""
        result = calculate_fd(100000, 7, 5, 4)
        assert abs(result.maturity_amount - 141478) <= 1
        assert result.interest_earned == result.maturity_amount - 100000

    def test_default_frequency_is_quarterly(self):
        assert calculate_fd(100000, 7, 5) == calculate_fd(100000, 7, 5, 4)

    def test_more_frequent_compounding_earns_more(self):
        annual = calculate_fd(100000, 7, 5, 1)
        monthly = calculate_fd(100000, 7, 5, 12)
        assert monthly.maturity_amount > annual.maturity_amount

    def test_annual_compounding_one_year(self):
        result = calculate_fd(100000, 10, 1, 1)
        assert result.maturity_amount == 110000
        assert result.interest_earned == 10000

    def test_zero_rate_returns_principal(self):
        result = calculate_fd(50000, 0, 3, 4)
        assert result.maturity_amount == 50000
        assert result.interest_earned == 0

    def test_rejects_zero_frequency(self):
        with pytest.raises(InvalidInputError):
            calculate_fd(100000, 7, 5, 0)

    def test_rejects_negative_principal(self):
        with pytest.raises(InvalidInputError):
            calculate_fd(-1, 7, 5, 4)


class TestRecurringDeposit:
    """Test recurring deposit maturity."""

    def test_three_year_rd(self):
        result = calculate_rd(5000, 7, 36)
        assert result.total_investment == 180000
        assert 200000 < result.maturity_amount < 202000

    def test_independently_rounded_fields(self):
        """Maturity and investment + interest may differ by one rupee at most."""
        for monthly, rate, months in [(5000, 7, 36), (777, 6.3, 17), (12345, 8.9, 119)]:
            result = calculate_rd(monthly, rate, months)
            assert abs(
                result.maturity_amount - (result.total_investment + result.interest_earned)
            ) <= 1

    def test_interest_is_positive(self):
        result = calculate_rd(1000, 5, 12)
        assert result.interest_earned > 0
        assert result.maturity_amount > result.total_investment

    def test_rejects_zero_rate(self):
        """The monthly rate is a divisor in the RD formula."""
        with pytest.raises(InvalidInputError):
            calculate_rd(5000, 0, 36)

    def test_rejects_fractional_months(self):
        with pytest.raises(InvalidInputError):
            calculate_rd(5000, 7, 12.5)

    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError):
            calculate_rd(float("nan"), 7, 36)


class TestEMI:
    """Test standalone EMI calculation."""

    def test_ten_lakh_at_nine_percent_for_five_years(self):
        result = calculate_emi(1000000, 9, 60)
        # Expected EMI around 20,758/month
        assert 20700 < result.emi < 20800
        assert abs(result.total_payment - result.emi * 60) <= 60
        assert abs(result.total_interest - (result.total_payment - 1000000)) <= 1
        assert result.principal == 1000000

    def test_monthly_payment_formula(self):
        payment = calculate_monthly_payment(100000, 12, 12)
        # 1% per month for 12 months
        assert abs(payment - 8884.88) < 0.01

    def test_rejects_zero_rate(self):
        with pytest.raises(InvalidInputError):
            calculate_emi(1000000, 0, 60)

    def test_rejects_zero_tenure(self):
        with pytest.raises(InvalidInputError):
            calculate_emi(1000000, 9, 0)


class TestLoanSchedule:
    """Test loan amortization schedules."""

    def test_schedule_length_and_months(self):
        result = calculate_loan(2000000, 10, 240)
        months = [entry.month for entry in result.payment_schedule]
        assert months == list(range(1, 241))

    def test_remaining_principal_non_increasing_to_zero(self):
        result = calculate_loan(2000000, 10, 240)
        balances = [entry.remaining_principal for entry in result.payment_schedule]
        assert all(b >= 0 for b in balances)
        assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
        assert balances[-1] < 1

    def test_principal_components_sum_to_principal(self):
        result = calculate_loan(500000, 8.5, 84)
        total_principal = sum(entry.principal for entry in result.payment_schedule)
        assert total_principal == pytest.approx(500000, abs=0.01)

    def test_each_month_splits_payment(self):
        result = calculate_loan(100000, 6, 60)
        for entry in result.payment_schedule:
            assert entry.principal + entry.interest == pytest.approx(entry.payment)

    def test_payment_matches_emi_calculator(self):
        loan = calculate_loan(1000000, 9, 60)
        emi = calculate_emi(1000000, 9, 60)
        assert loan.monthly_payment == emi.emi
        assert loan.total_payment == emi.total_payment
        # Summed month by month vs derived from the total, rounding may differ
        assert abs(loan.total_interest - emi.total_interest) <= 1

    def test_interest_declines_over_time(self):
        schedule = calculate_loan(300000, 11, 36).payment_schedule
        assert schedule[0].interest > schedule[-1].interest
        assert schedule[0].principal < schedule[-1].principal

    def test_whole_float_tenure_accepted(self):
        result = calculate_loan(100000, 9, 12.0)
        assert len(result.payment_schedule) == 12
        assert result == calculate_loan(100000, 9, 12)

    def test_rejects_fractional_tenure(self):
        """EMI and schedule share one tenure check."""
        with pytest.raises(InvalidInputError):
            calculate_loan(100000, 9, 12.5)
        with pytest.raises(InvalidInputError):
            calculate_emi(100000, 9, 12.5)

    def test_rejects_zero_rate(self):
        with pytest.raises(InvalidInputError):
            calculate_loan(100000, 0, 12)


class TestScheduleSampling:
    """Test chart sampling of schedules."""

    def test_twenty_year_loan(self):
        schedule = calculate_loan(2000000, 10, 240).payment_schedule
        points = sample_schedule(schedule)
        months = [p.month for p in points]
        assert months[:12] == list(range(1, 13))
        assert months[12:] == list(range(24, 241, 12))
        assert len(points) == 32

    def test_appends_last_month(self):
        schedule = calculate_loan(100000, 10, 30).payment_schedule
        months = [p.month for p in sample_schedule(schedule)]
        assert months == list(range(1, 13)) + [24, 30]

    def test_short_schedule_kept_whole(self):
        schedule = calculate_loan(100000, 10, 6).payment_schedule
        assert sample_schedule(schedule) == list(schedule)


class TestPPF:
    """Test PPF yearly accrual."""

    def test_fifteen_year_ppf(self):
        result = calculate_ppf(150000, 15)
        assert result.total_investment == 2250000
        assert len(result.yearly_details) == 15
        # Around 40.68 lakh at 7.1%
        assert 4060000 < result.maturity_amount < 4080000
        assert abs(
            result.total_interest_earned
            - (result.maturity_amount - result.total_investment)
        ) <= 1

    def test_first_year(self):
        first = calculate_ppf(150000, 15).yearly_details[0]
        assert first.year == 1
        assert first.investment == 150000
        assert first.interest == 10650
        assert first.balance == 160650

    def test_balance_strictly_increases(self):
        details = calculate_ppf(500, 50).yearly_details
        balances = [d.balance for d in details]
        assert all(later > earlier for earlier, later in zip(balances, balances[1:]))

    def test_last_balance_is_maturity(self):
        result = calculate_ppf(100000, 20)
        assert result.yearly_details[-1].balance == result.maturity_amount

    def test_fixed_rate(self):
        assert PPF_ANNUAL_RATE == 7.1

    def test_whole_float_years_accepted(self):
        assert calculate_ppf(150000, 15.0) == calculate_ppf(150000, 15)

    def test_rejects_fractional_years(self):
        with pytest.raises(InvalidInputError):
            calculate_ppf(150000, 12.5)

    def test_zero_years(self):
        result = calculate_ppf(150000, 0)
        assert result.maturity_amount == 0
        assert result.yearly_details == ()


class TestIdempotence:
    """Identical inputs always produce identical results."""

    @pytest.mark.parametrize(
        "calculator,args",
        [
            (calculate_fd, (100000, 7, 5, 4)),
            (calculate_rd, (5000, 7, 36)),
            (calculate_emi, (1000000, 9, 60)),
            (calculate_loan, (2000000, 10, 240)),
            (calculate_ppf, (150000, 15)),
        ],
    )
    def test_repeated_calls_match(self, calculator, args):
        assert calculator(*args) == calculator(*args)

    def test_results_are_immutable(self):
        result = calculate_fd(100000, 7, 5, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.maturity_amount = 0

    def test_results_are_finite(self):
        result = calculate_loan(2000000, 10, 240)
        assert all(
            math.isfinite(entry.remaining_principal) for entry in result.payment_schedule
        )
