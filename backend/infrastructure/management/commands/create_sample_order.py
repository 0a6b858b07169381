"""
Create Sample Order Command.

Builds a supplier and a purchase order with two items in memory and prints
the item and order totals. Nothing is persisted.
"""

import logging
from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from domain.procurement.aggregates import PurchaseOrder
from domain.procurement.value_objects import ProductId
from domain.scm.aggregates import Supplier
from domain.shared.exceptions import DomainException
from domain.shared.value_objects import Address

logger = logging.getLogger(__name__)

SAMPLE_ITEMS = [
    (10, Decimal('25.99')),
    (20, Decimal('19.99')),
]


class Command(BaseCommand):
    help = 'Create a sample purchase order in memory and print its totals'

    def add_arguments(self, parser):
        parser.add_argument(
            '--order-number',
            type=str,
            default='PO001',
            help='Purchase order number'
        )
        parser.add_argument(
            '--supplier-id',
            type=str,
            default='SUP001',
            help='Identifier of the sample supplier'
        )
        parser.add_argument(
            '--supplier-name',
            type=str,
            default='Microsoft, Inc.',
            help='Name of the sample supplier'
        )
        parser.add_argument(
            '--currency',
            type=str,
            default=None,
            help='Order currency (defaults to PROCUREMENT["DEFAULT_CURRENCY"])'
        )

    def handle(self, *args, **options):
        currency = options['currency']
        if currency is None:
            currency = settings.PROCUREMENT['DEFAULT_CURRENCY']

        try:
            supplier = self._create_supplier(options['supplier_id'], options['supplier_name'])
            order = self._create_order(options['order_number'], supplier, currency)
        except DomainException as exc:
            logger.warning(f"Sample order rejected: {exc.message} ({exc.code})")
            raise CommandError(exc.message)

        for event in supplier.clear_domain_events() + order.clear_domain_events():
            logger.debug(f"{event.event_type} at {event.occurred_at.isoformat()}")

        self.stdout.write(
            f"Purchase Order {order.order_number} created for Supplier "
            f"{supplier.name} in {order.currency}"
        )
        for item in order.items:
            self.stdout.write(f"Order Item Total: {item.calculate_item_total()}")

        self.stdout.write(
            self.style.SUCCESS(f"Total Order Amount: {order.calculate_order_total()}")
        )

    def _create_supplier(self, identifier: str, name: str) -> Supplier:
        """Create the sample supplier with its address."""
        address = Address(
            street='Supplier St',
            number='123',
            city='SupplierCity',
            state_or_region='Supplier State',
            postal_code='12345',
            country='United States',
        )
        return Supplier(identifier, name, address)

    def _create_order(self, order_number: str, supplier: Supplier, currency: str) -> PurchaseOrder:
        """Create the sample order and append its items."""
        order = PurchaseOrder(order_number, supplier.supplier_id, timezone.now(), currency)
        for quantity, unit_price in SAMPLE_ITEMS:
            order.add_item(ProductId.new(), quantity, unit_price)

        logger.info(
            f"Created purchase order {order.order_number} for supplier "
            f"{order.supplier_id} with {order.item_count} items"
        )
        return order
