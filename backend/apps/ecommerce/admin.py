# apps/ecommerce/admin.py

"""
Django admin configuration for e-commerce models
"""

from django.contrib import admin, messages

from .domain.services.order_workflow import OrderStatus
from .models import Order, OrderHistory, OrderItem, Product, StoreSettings
from .services import OrderService, ServiceError


# ============================================================================
# SETTINGS ADMIN
# ============================================================================

@admin.register(StoreSettings)
class StoreSettingsAdmin(admin.ModelAdmin):
    """Admin for the single store settings row"""

    fieldsets = (
        ('Store Information', {
            'fields': ('store_name', 'store_description', 'support_email', 'support_phone')
        }),
        ('Shipping & Delivery', {
            'fields': ('shipping_charge', 'free_shipping_threshold', 'pincodes')
        }),
        ('Payment Methods', {
            'fields': ('is_cod_enabled', 'is_stripe_enabled', 'razorpay_key')
        }),
        ('COD Convenience Fee', {
            'fields': (
                'enable_cod_fee', 'cod_fee_type', 'cod_fee_percentage',
                'cod_fee_fixed', 'cod_fee_min_order',
            )
        }),
        ('Additional', {
            'fields': ('gift_wrap_fee', 'loyalty_rate', 'email_alerts', 'sms_alerts')
        }),
    )

    def has_add_permission(self, request):
        return not StoreSettings.objects.exists()


# ============================================================================
# CATALOGUE ADMIN
# ============================================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'price', 'inventory_count', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('name',)


# ============================================================================
# ORDER ADMIN
# ============================================================================

class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ('product', 'product_name', 'quantity', 'price_at_purchase', 'variant_color', 'variant_size')


class OrderHistoryInline(admin.TabularInline):
    model = OrderHistory
    extra = 0
    can_delete = False
    fields = ('timestamp', 'field', 'previous_value', 'new_value', 'transition', 'actor', 'note')
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


def _status_action(target: OrderStatus):
    def action(modeladmin, request, queryset):
        service = OrderService()
        changed = 0
        for order in queryset:
            try:
                previous = order.status
                service.update_status(order, target, actor=request.user, note='Changed from Django admin')
                changed += int(previous != order.status)
            except ServiceError as e:
                modeladmin.message_user(request, f"Order #{order.pk}: {e.message}", level=messages.ERROR)
        modeladmin.message_user(request, f"{changed} order(s) marked {target.value}")

    action.__name__ = f"mark_{target.name.lower()}"
    action.short_description = f"Mark selected orders as {target.value}"
    return action


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Status and payment status go through OrderService so every change is audited"""

    list_display = ('id', 'customer_name', 'status', 'payment_status', 'payment_method', 'total_amount', 'created_at')
    list_filter = ('status', 'payment_status', 'payment_method')
    search_fields = ('customer_name', 'customer_email', 'customer_phone')
    readonly_fields = ('status', 'payment_status', 'created_at', 'updated_at')
    inlines = [OrderItemInline, OrderHistoryInline]
    actions = [_status_action(status) for status in OrderStatus]
