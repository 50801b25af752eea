from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.dtos import CategoryRequestDTO
from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.services import CategoryService
from modules.core.exceptions import DomainError
from modules.products.dtos import ProductRequestDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.skus.dtos import SKURequestDTO
from modules.skus.repositories.django_repository import SKUDjangoRepository
from modules.skus.services import SKUService

SEED_CATALOG = {
    "Apparel": [
        ("Classic Tee", "Soft cotton tee with a relaxed fit for everyday wear"),
        ("Running Shorts", "Lightweight shorts with a breathable mesh lining"),
        ("Winter Jacket Kit", "Insulated jacket with detachable hood and liner"),
    ],
    "Footwear": [
        ("Trail Runner", "Grippy outsole built for muddy mountain paths"),
        ("Canvas Sneaker", None),
    ],
    "Home": [
        ("Linen Bedding Bundle", "Duvet cover with two matching pillow cases"),
        ("Ceramic Mug", "Stoneware mug that keeps coffee warm longer"),
    ],
}

COLORS = ["Black", "White", "Navy", "Forest Green"]
SIZES = ["S", "M", "L", "XL"]


class Command(BaseCommand):
    help = "Seed database with a small development catalog."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        with transaction.atomic():
            categories = self._seed_categories()
            products = self._seed_products(categories)
            skus_created = self._seed_skus(products)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"categories={len(categories)}, "
                f"products={len(products)}, "
                f"skus={skus_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_categories(self) -> list[Category]:
        self.stdout.write("Creating categories...")
        service = CategoryService(repository=CategoryDjangoRepository())
        categories: list[Category] = []
        for name in SEED_CATALOG:
            category = Category.objects.filter(name=name).first()
            if category is None:
                category = service.create_category(CategoryRequestDTO(name=name))
            categories.append(category)
        return categories

    def _seed_products(self, categories: list[Category]) -> list[Product]:
        self.stdout.write("Creating products...")
        service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )
        products: list[Product] = []
        for category in categories:
            for name, description in SEED_CATALOG[category.name]:
                product = Product.objects.filter(name=name, category=category).first()
                if product is None:
                    dto = ProductRequestDTO(
                        name=name, description=description, category_id=category.id
                    )
                    product = service.create_product(dto)
                products.append(product)
        return products

    def _seed_skus(self, products: list[Product]) -> int:
        self.stdout.write("Creating SKUs...")
        service = SKUService(
            repository=SKUDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        created = 0
        for product in products:
            for color in random.sample(COLORS, k=2):
                for size in SIZES:
                    dto = SKURequestDTO(
                        product_id=product.id,
                        color=color,
                        size=size,
                        price=Decimal(random.randint(999, 19999)) / 100,
                        stock_quantity=random.randint(0, 250),
                    )
                    try:
                        service.create_sku(dto)
                    except DomainError as exc:
                        self.stdout.write(f"  skipped {product.name} {color}/{size}: {exc.code}")
                        continue
                    created += 1
        return created
