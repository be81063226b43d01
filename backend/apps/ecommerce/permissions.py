from rest_framework import permissions


class StoreAdminPermission(permissions.BasePermission):
    """Only authenticated staff users can use the admin API"""
    
    message = 'Store admin access required'
    
    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)


class CanManageOrders(StoreAdminPermission):
    """Staff may read orders; changing them needs the change_order permission"""
    
    def has_permission(self, request, view):
        if not super().has_permission(request, view):
            return False
        
        if request.method in permissions.SAFE_METHODS:
            return True
        
        return request.user.has_perm('ecommerce.change_order')


class CanManageSettings(StoreAdminPermission):
    """Staff may read settings; changing them needs the change_storesettings permission"""
    
    def has_permission(self, request, view):
        if not super().has_permission(request, view):
            return False
        
        if request.method in permissions.SAFE_METHODS:
            return True
        
        return request.user.has_perm('ecommerce.change_storesettings')
