# apps/ecommerce/tests/integration/test_api_endpoints.py
import pytest
from decimal import Decimal
from rest_framework import status
from django.urls import reverse

from ...models import Order, StoreSettings
from ..factories import *


@pytest.mark.django_db
class TestStoreSettingsAPI:
    """Test store settings endpoints."""
    
    def test_get_defaults_without_row(self, authenticated_client):
        response = authenticated_client.get(reverse('ecommerce:settings'))
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['shipping_charge'] == '100.00'
        assert response.data['enable_cod_fee'] is False
    
    def test_update_settings(self, authenticated_client, store_settings):
        data = {
            'cod_fee_type': 'fixed',
            'cod_fee_fixed': '30.00',
            'pincodes': '560001, 560002,',
        }
        
        response = authenticated_client.put(reverse('ecommerce:settings'), data, format='json')
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['cod_fee_type'] == 'fixed'
        assert response.data['pincodes'] == ['560001', '560002']
        store_settings.refresh_from_db()
        assert store_settings.cod_fee_fixed == Decimal('30.00')
    
    def test_update_creates_row(self, authenticated_client):
        response = authenticated_client.patch(
            reverse('ecommerce:settings'), {'store_name': 'Kurta House'}, format='json'
        )
        
        assert response.status_code == status.HTTP_200_OK
        assert StoreSettings.load().store_name == 'Kurta House'
    
    def test_update_rejects_out_of_range_percentage(self, authenticated_client, store_settings):
        response = authenticated_client.put(
            reverse('ecommerce:settings'), {'cod_fee_percentage': '150'}, format='json'
        )
        
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'cod_fee_percentage' in response.data
    
    def test_update_rejects_unknown_fee_type(self, authenticated_client, store_settings):
        response = authenticated_client.put(
            reverse('ecommerce:settings'), {'cod_fee_type': 'flat'}, format='json'
        )
        
        assert response.status_code == status.HTTP_400_BAD_REQUEST
    
    def test_staff_can_read_but_not_update(self, staff_client, store_settings):
        url = reverse('ecommerce:settings')
        
        assert staff_client.get(url).status_code == status.HTTP_200_OK
        response = staff_client.put(url, {'store_name': 'Nope'}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN
    
    def test_customer_is_rejected(self, api_client, user):
        api_client.force_authenticate(user=user)
        
        response = api_client.get(reverse('ecommerce:settings'))
        assert response.status_code == status.HTTP_403_FORBIDDEN
    
    def test_anonymous_is_rejected(self, api_client):
        response = api_client.get(reverse('ecommerce:settings'))
        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


@pytest.mark.django_db
class TestFeePreviewAPI:
    """Test the live fee preview endpoint."""
    
    def test_preview_with_unsaved_settings(self, staff_client, store_settings):
        data = {
            'shipping_charge': '100',
            'free_shipping_threshold': '999',
            'enable_cod_fee': True,
            'cod_fee_type': 'percentage',
            'cod_fee_percentage': '2',
        }
        
        response = staff_client.post(reverse('ecommerce:fee-preview'), data, format='json')
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['subtotal'] == '1000.00'
        assert response.data['shipping_fee'] == '0.00'
        assert response.data['cod_fee'] == '20.00'
        assert response.data['total'] == '1020.00'
        assert response.data['qualifies_for_free_shipping'] is True
    
    def test_preview_below_threshold_with_gift_wrap(self, staff_client):
        data = {
            'subtotal': '998',
            'gift_wrap': True,
            'shipping_charge': '100',
            'free_shipping_threshold': '999',
            'enable_cod_fee': True,
            'cod_fee_type': 'fixed',
            'cod_fee_fixed': '30',
            'gift_wrap_fee': '50',
        }
        
        response = staff_client.post(reverse('ecommerce:fee-preview'), data, format='json')
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['shipping_fee'] == '100.00'
        assert response.data['total'] == '1178.00'
    
    def test_preview_reports_misconfiguration(self, staff_client):
        data = {'enable_cod_fee': True, 'cod_fee_type': 'flat'}
        
        response = staff_client.post(reverse('ecommerce:fee-preview'), data, format='json')
        
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'cod_fee_type' in response.data['field_errors']
    
    def test_preview_rejects_negative_percentage(self, staff_client):
        data = {'enable_cod_fee': True, 'cod_fee_percentage': '-2'}
        
        response = staff_client.post(reverse('ecommerce:fee-preview'), data, format='json')
        
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'cod_fee_percentage' in response.data['field_errors']


@pytest.mark.django_db
class TestOrderAPI:
    """Test order endpoints."""
    
    def test_list_orders(self, authenticated_client):
        OrderFactory.create_batch(3)
        
        response = authenticated_client.get(reverse('ecommerce:order-list'))
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3
        assert len(response.data['results']) == 3
    
    def test_filter_by_status(self, authenticated_client):
        OrderFactory.create_batch(2, status='Shipped')
        OrderFactory(status='Pending')
        
        response = authenticated_client.get(reverse('ecommerce:order-list'), {'status': 'Shipped'})
        
        assert response.data['count'] == 2
        assert {row['status'] for row in response.data['results']} == {'Shipped'}
    
    def test_search_by_customer(self, authenticated_client):
        OrderFactory(customer_name='Priya Sharma')
        OrderFactory(customer_name='Arjun Mehta')
        
        response = authenticated_client.get(reverse('ecommerce:order-list'), {'search': 'priya'})
        
        assert response.data['count'] == 1
        assert response.data['results'][0]['customer_name'] == 'Priya Sharma'
    
    def test_order_detail(self, authenticated_client, cod_order):
        url = reverse('ecommerce:order-detail', kwargs={'pk': cod_order.pk})
        
        response = authenticated_client.get(url)
        
        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['items']) == 2
        assert response.data['subtotal_amount'] == '1000.00'
        assert response.data['timeline'][0] == {'stage': 'Placed', 'reached': True}
        assert response.data['is_invoice_eligible'] is True
    
    def test_missing_order(self, authenticated_client):
        url = reverse('ecommerce:order-detail', kwargs={'pk': 999999})
        assert authenticated_client.get(url).status_code == status.HTTP_404_NOT_FOUND
    
    def test_update_status(self, authenticated_client, admin_user):
        order = OrderFactory()
        url = reverse('ecommerce:order-update-status', kwargs={'pk': order.pk})
        
        response = authenticated_client.post(url, {'status': 'Shipped', 'note': 'AWB 1234'}, format='json')
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'Shipped'
        assert [row['reached'] for row in response.data['timeline']] == [True, True, True, False]
        
        order.refresh_from_db()
        assert order.status == 'Shipped'
        entry = order.history.get()
        assert entry.actor == admin_user
        assert entry.note == 'AWB 1234'
    
    def test_update_status_twice_records_once(self, authenticated_client):
        order = OrderFactory()
        url = reverse('ecommerce:order-update-status', kwargs={'pk': order.pk})
        
        authenticated_client.post(url, {'status': 'Shipped'}, format='json')
        response = authenticated_client.post(url, {'status': 'Shipped'}, format='json')
        
        assert response.status_code == status.HTTP_200_OK
        assert order.history.count() == 1
    
    def test_update_status_rejects_unknown_value(self, authenticated_client):
        order = OrderFactory()
        url = reverse('ecommerce:order-update-status', kwargs={'pk': order.pk})
        
        response = authenticated_client.post(url, {'status': 'Lost'}, format='json')
        
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Delivered' in response.data['allowed']
        assert Order.objects.get(pk=order.pk).status == 'Pending'
    
    def test_update_status_requires_change_permission(self, staff_client):
        order = OrderFactory()
        url = reverse('ecommerce:order-update-status', kwargs={'pk': order.pk})
        
        response = staff_client.post(url, {'status': 'Shipped'}, format='json')
        
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Order.objects.get(pk=order.pk).status == 'Pending'
    
    def test_update_payment_status(self, authenticated_client):
        order = OrderFactory(status='Delivered')
        url = reverse('ecommerce:order-update-payment-status', kwargs={'pk': order.pk})
        
        response = authenticated_client.post(url, {'payment_status': 'Paid'}, format='json')
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['payment_status'] == 'Paid'
        assert response.data['is_refund_eligible'] is True
    
    def test_history(self, authenticated_client):
        order = OrderFactory()
        authenticated_client.post(
            reverse('ecommerce:order-update-status', kwargs={'pk': order.pk}),
            {'status': 'Processing'}, format='json'
        )
        authenticated_client.post(
            reverse('ecommerce:order-update-payment-status', kwargs={'pk': order.pk}),
            {'payment_status': 'Paid'}, format='json'
        )
        url = reverse('ecommerce:order-history', kwargs={'pk': order.pk})
        
        response = authenticated_client.get(url)
        
        assert response.status_code == status.HTTP_200_OK
        assert [row['field'] for row in response.data] == ['payment_status', 'status']
        
        response = authenticated_client.get(url, {'field': 'status'})
        assert len(response.data) == 1
        assert response.data[0]['transition'] == 'forward'
    
    def test_summary(self, authenticated_client, store_settings, cod_order):
        url = reverse('ecommerce:order-summary', kwargs={'pk': cod_order.pk})
        
        response = authenticated_client.get(url)
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['subtotal'] == '1000.00'
        assert response.data['recomputed']['cod_fee'] == '20.00'
        assert response.data['recomputed']['total'] == '1020.00'
    
    def test_summary_with_misconfigured_settings_row(self, authenticated_client, store_settings, cod_order):
        StoreSettings.objects.filter(pk=store_settings.pk).update(enable_cod_fee=True, cod_fee_type='flat')
        url = reverse('ecommerce:order-summary', kwargs={'pk': cod_order.pk})
        
        response = authenticated_client.get(url)
        
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'cod_fee_type' in response.data['field_errors']
        assert response.data['detail'].code == 'invalid_settings'
    
    def test_orders_are_read_only(self, authenticated_client):
        order = OrderFactory()
        url = reverse('ecommerce:order-detail', kwargs={'pk': order.pk})
        
        response = authenticated_client.delete(url)
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestDashboardAPI:
    """Test dashboard endpoints."""
    
    def test_stats(self, staff_client):
        OrderFactory(total_amount=Decimal('500.00'))
        OrderFactory(total_amount=Decimal('700.00'), status='Shipped')
        ProductFactory(inventory_count=1)
        
        response = staff_client.get(reverse('ecommerce:dashboard-stats'))
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_orders'] == 2
        assert response.data['total_revenue'] == '1200.00'
        assert response.data['pending_orders'] == 1
        assert response.data['low_stock_products'] == 1
    
    def test_recent_orders(self, staff_client):
        OrderFactory.create_batch(6)
        
        response = staff_client.get(reverse('ecommerce:dashboard-recent-orders'))
        
        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 5
    
    def test_low_stock(self, staff_client):
        ProductFactory(name='Silk Scarf', inventory_count=2, images=[])
        ProductFactory(inventory_count=80)
        
        response = staff_client.get(reverse('ecommerce:dashboard-low-stock'))
        
        assert response.status_code == status.HTTP_200_OK
        assert response.data == [
            {'id': response.data[0]['id'], 'name': 'Silk Scarf', 'stock': 2, 'image': None}
        ]
    
    def test_customer_is_rejected(self, api_client, user):
        api_client.force_authenticate(user=user)
        
        response = api_client.get(reverse('ecommerce:dashboard-stats'))
        assert response.status_code == status.HTTP_403_FORBIDDEN
