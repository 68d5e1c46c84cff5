"""
Django management command to create test data for development and testing.

Creates:
- A superuser (admin/admin)
- A product with released, unreleased and renewal purchasables
- Optionally, a license with two activations and a purchase for the superuser
"""

import logging

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from activations.infrastructure.models import Activation
from licenses.infrastructure.models import License
from products.infrastructure.models import Product, Purchasable
from purchases.infrastructure.models import Purchase

logger = logging.getLogger(__name__)
User = get_user_model()


class Command(BaseCommand):
    """Command to create test data."""

    help = "Create test data (superuser, product, purchasables, license, activations)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-superuser",
            action="store_true",
            help="Skip creating superuser",
        )
        parser.add_argument(
            "--skip-license",
            action="store_true",
            help="Skip creating test license and purchase",
        )
        parser.add_argument(
            "--product-title",
            type=str,
            default="Test Product",
            help="Product title (default: Test Product)",
        )
        parser.add_argument(
            "--product-slug",
            type=str,
            default=None,
            help="Product slug (default: derived from the title)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        with transaction.atomic():
            user = None
            if not options["skip_superuser"]:
                user = self.create_superuser()

            product = self.create_product(options["product_title"], options["product_slug"])

            license = None
            if not options["skip_license"]:
                if user is None:
                    user = User.objects.filter(is_superuser=True).first()
                if user is None:
                    # pylint: disable=no-member
                    self.stdout.write(
                        self.style.WARNING("No superuser to own the test license, skipping")
                    )
                else:
                    license = self.create_test_license(user, product)

            self.print_summary(product, license)

    def create_superuser(self):
        """Create a superuser if it doesn't exist."""
        username = "admin"
        email = "admin@example.com"
        password = "admin"

        existing = User.objects.filter(username=username).first()
        if existing:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Superuser '{username}' already exists"))
            return existing

        user = User.objects.create_superuser(username=username, email=email, password=password)
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created superuser: {username} / {password}"))
        return user

    def create_product(self, title: str, slug: str = None) -> Product:
        """Create a test product with its purchasables."""
        if not slug:
            slug = title.lower().replace(" ", "-").replace("_", "-")

        # pylint: disable=no-member
        existing = Product.objects.filter(slug=slug).first()
        if existing:
            self.stdout.write(self.style.WARNING(f"Product '{title}' already exists (slug: {slug})"))
            return existing

        product = Product.objects.create(
            slug=slug,
            title=title,
            description="A product to try the storefront with.",
            long_description="Everything you need to know about this product.",
            url="https://example.com",
        )
        Purchasable.objects.create(
            product=product,
            title="Single license",
            price_in_usd_cents=7900,
            checkout_product_id="test-single",
            released=True,
            getting_started_url="https://example.com/docs",
            getting_started_description="<p>Install the app and enter your license key.</p>",
            sort_order=1,
        )
        Purchasable.objects.create(
            product=product,
            title="Team license",
            price_in_usd_cents=19900,
            released=False,
            sort_order=2,
        )
        Purchasable.objects.create(
            product=product,
            title="Renewal",
            price_in_usd_cents=3900,
            released=True,
            is_renewal=True,
            sort_order=3,
        )

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created product: {product.title} (slug: {slug})"))
        return product

    def create_test_license(self, user, product: Product) -> License:
        """Create a purchase, a license and two activations for the user."""
        purchasable = product.purchasables.filter(released=True, is_renewal=False).first()
        Purchase.objects.create(purchasable=purchasable, user=user)
        license = License.objects.create(user=user, purchasable=purchasable)
        for name in ("MacBook", "Office PC"):
            Activation.objects.create(license=license, name=name)

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created license {license.key} for {user}"))
        return license

    def print_summary(self, product: Product, license: License = None):
        """Print summary of created test data."""
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("\n" + "=" * 60))
        self.stdout.write(self.style.SUCCESS("Test Data Summary"))
        self.stdout.write(self.style.SUCCESS("=" * 60))

        self.stdout.write("\nSuperuser:")
        self.stdout.write("   Username: admin")
        self.stdout.write("   Password: admin")
        self.stdout.write("   URL: http://localhost:8000/admin/")

        self.stdout.write("\nProduct:")
        self.stdout.write(f"   Title: {product.title}")
        self.stdout.write(f"   Slug: {product.slug}")
        self.stdout.write(f"   Page: http://localhost:8000/products/{product.slug}/")

        if license:
            self.stdout.write("\nLicense:")
            self.stdout.write(f"   Key: {license.key}")
            self.stdout.write(f"   Activations: {license.activations.count()}")
            self.stdout.write(
                f"   API: http://localhost:8000/api/v1/licenses/{license.id}/activations"
            )

        self.stdout.write(self.style.SUCCESS("\n" + "=" * 60 + "\n"))
