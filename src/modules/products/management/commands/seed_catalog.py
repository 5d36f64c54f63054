from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Category, Product

CATEGORIES = [
    ("Serum", "serum", "Serum wajah untuk perawatan intensif."),
    ("Cream", "cream", None),
    ("Paket", "paket", "Paket hemat beberapa produk."),
]

# slug, name, category slug, general, consultant, supervisor, manager, director
PRODUCTS = [
    ("serum-brightening", "Serum Brightening", "serum",
     Decimal("150000"), Decimal("120000"), Decimal("110000"), Decimal("100000"), Decimal("90000")),
    ("night-cream", "Night Cream", "cream",
     Decimal("95000"), Decimal("80000"), None, None, None),
    ("paket-glowing", "Paket Glowing", "paket",
     Decimal("450000"), None, None, None, Decimal("350000")),
    ("sunscreen-spf50", "Sunscreen SPF 50", None,
     None, None, None, None, None),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products for the storefront."

    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")

        categories = self._seed_categories()
        products = self._seed_products(categories)
        hidden = self._seed_hidden_product()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"products={len(products)}, "
                f"hidden={hidden}"
            )
        )

    def _seed_categories(self) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for name, slug, description in CATEGORIES:
            category, _ = Category.objects.get_or_create(
                slug=slug,
                defaults={"name": name, "description": description},
            )
            categories[slug] = category
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> list[Product]:
        products: list[Product] = []
        for slug, name, category_slug, *prices in PRODUCTS:
            general, consultant, supervisor, manager, director = prices
            product, _ = Product.objects.get_or_create(
                slug=slug,
                defaults={
                    "name": name,
                    "description": f"{name} dari DRW Skincare.\nCocok untuk semua jenis kulit.",
                    "bpom": "NA18201200001" if category_slug else None,
                    "category": categories.get(category_slug) if category_slug else None,
                    "general_price": general,
                    "consultant_price": consultant,
                    "supervisor_price": supervisor,
                    "manager_price": manager,
                    "director_price": director,
                    "is_bundling": category_slug == "paket",
                },
            )
            products.append(product)
        return products

    def _seed_hidden_product(self) -> int:
        _, created = Product.objects.get_or_create(
            slug="produk-lama",
            defaults={
                "name": "Produk Lama",
                "general_price": Decimal("50000"),
                "is_visible": False,
            },
        )
        return int(created)
