"""
Unit tests for EmployeeManager.
"""

import pytest

from workforce.business_logic.employee_manager import EmployeeManager
from workforce.business_logic.entities import LeadEntity, Salary


class TestPromote:
    """Tests for promotion."""

    def test_promote_adds_raise(self, employee_manager, employee):
        """Test 7000 promoted by 500 pays 7500."""
        new_salary = employee_manager.promote(employee, 500.0)
        assert new_salary == Salary(7500)
        assert employee.get_pay() == 7500

    def test_promote_narrates(self, employee_manager, employee, narrator):
        """Test the promotion line."""
        employee_manager.promote(employee, 500.0)
        assert narrator.lines[-1] == "[promote] Promoting Bob by 500"

    def test_promote_replaces_salary_object(self, employee_manager, employee):
        """Test a new Salary is assigned rather than mutated."""
        before = employee.salary
        employee_manager.promote(employee, 250.0)
        assert employee.salary is not before
        assert before.amount == 7000.0

    def test_promote_lead(self, employee_manager, registry):
        """Test a lead is promoted through its manager part."""
        lead = LeadEntity("Dave", 40, 3001, 20000.0, 10, "TopConsult", registry=registry)
        employee_manager.promote(lead, 1000)
        assert lead.get_pay() == 21000
        assert lead.manager.get_pay() == 21000

    def test_narrator_required(self):
        """Test the manager needs a narrator."""
        with pytest.raises(ValueError):
            EmployeeManager(None)


class TestPayroll:
    """Tests for payroll listing."""

    def test_payroll_order(self, employee_manager, employee, manager, intern):
        """Test pays are returned in placement order."""
        assert employee_manager.payroll([employee, manager, intern]) == [7000.0, 15000.0, 1000.0]

    def test_total_payroll(self, employee_manager, employee, manager, intern):
        """Test the total is a Salary sum."""
        assert employee_manager.total_payroll([employee, manager, intern]) == Salary(23000.0)

    def test_total_payroll_empty(self, employee_manager):
        """Test an empty payroll totals zero."""
        assert employee_manager.total_payroll([]) == Salary()
