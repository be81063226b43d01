# apps/ecommerce/tests/factories/core.py
import factory
from factory.django import DjangoModelFactory
from django.contrib.auth import get_user_model

__all__ = ['UserFactory', 'StaffUserFactory']


class UserFactory(DjangoModelFactory):
    class Meta:
        model = get_user_model()
        django_get_or_create = ('username',)
    
    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    is_active = True
    password = factory.django.Password('testpass123')


class StaffUserFactory(UserFactory):
    username = factory.Sequence(lambda n: f"staff{n}")
    is_staff = True
