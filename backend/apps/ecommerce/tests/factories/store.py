# apps/ecommerce/tests/factories/store.py
import factory
from factory.django import DjangoModelFactory
from decimal import Decimal

from ...constants import PAYMENT_METHOD_COD, STORE_SETTINGS_ROW_ID
from ...domain.services.order_workflow import OrderStatus, PaymentStatus
from ...models import Order, OrderItem, Product, StoreSettings

__all__ = ['StoreSettingsFactory', 'ProductFactory', 'OrderFactory', 'OrderItemFactory']


class StoreSettingsFactory(DjangoModelFactory):
    class Meta:
        model = StoreSettings
        django_get_or_create = ('id',)
    
    id = STORE_SETTINGS_ROW_ID
    store_name = factory.Faker('company')
    support_email = factory.Faker('company_email')
    shipping_charge = Decimal('100.00')
    free_shipping_threshold = Decimal('999.00')
    is_cod_enabled = True
    enable_cod_fee = True
    cod_fee_type = 'percentage'
    cod_fee_percentage = Decimal('2.00')
    cod_fee_fixed = Decimal('30.00')
    cod_fee_min_order = Decimal('0.00')
    gift_wrap_fee = Decimal('50.00')
    loyalty_rate = Decimal('1.00')


class ProductFactory(DjangoModelFactory):
    class Meta:
        model = Product
    
    name = factory.Faker('catch_phrase')
    description = factory.Faker('text', max_nb_chars=200)
    price = Decimal('250.00')
    inventory_count = 50
    images = factory.LazyFunction(lambda: ['https://cdn.example.com/products/1.jpg'])
    is_active = True


class OrderFactory(DjangoModelFactory):
    class Meta:
        model = Order
    
    customer_name = factory.Faker('name')
    customer_email = factory.Faker('email')
    customer_phone = factory.Sequence(lambda n: f"98{n:08d}")
    shipping_address = factory.LazyFunction(lambda: {
        'line1': '12 MG Road',
        'city': 'Bengaluru',
        'state': 'Karnataka',
        'zip': '560001',
    })
    status = OrderStatus.PENDING.value
    payment_status = PaymentStatus.UNPAID.value
    payment_method = PAYMENT_METHOD_COD
    total_amount = Decimal('1000.00')


class OrderItemFactory(DjangoModelFactory):
    class Meta:
        model = OrderItem
    
    order = factory.SubFactory(OrderFactory)
    product = factory.SubFactory(ProductFactory)
    product_name = factory.LazyAttribute(lambda obj: obj.product.name if obj.product else 'Deleted product')
    quantity = 1
    price_at_purchase = Decimal('250.00')
