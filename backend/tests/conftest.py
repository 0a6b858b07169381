"""
Pytest configuration and fixtures for the procurement domain tests
"""
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

os.environ['DJANGO_ENV'] = 'test'
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Now import after path and settings are set
import django
import pytest

django.setup()

from domain.procurement.aggregates import PurchaseOrder
from domain.scm.aggregates import Supplier
from domain.scm.value_objects import SupplierId
from domain.shared.value_objects import Address


@pytest.fixture
def address():
    """Complete postal address of the sample supplier"""
    return Address("Supplier St", "123", "SupplierCity", "Supplier State", "12345", "United States")


@pytest.fixture
def supplier(address):
    """Supplier SUP001"""
    return Supplier("SUP001", "Microsoft, Inc.", address)


@pytest.fixture
def order_date():
    return datetime(2024, 5, 17, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def order(order_date):
    """Empty USD purchase order for SUP001"""
    return PurchaseOrder("PO001", SupplierId("SUP001"), order_date, "USD")
