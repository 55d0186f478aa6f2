from django.core.management.base import BaseCommand
from django.db import transaction
from apps.catalog.models import Category, Product, ProductColor, ProductImage
from apps.common import get_logger
from apps.orders.models import Order

logger = get_logger(__name__).bind(component="common", layer="seed")

TALLAS_ROPA = ["XS", "S", "M", "L", "XL", "XXL"]
TALLAS_PANTALON = ["28", "30", "32", "34", "36", "38"]

CATEGORIES = [
    # slug, nombre, descripcion, icono, ruta
    ("remeras", "Remeras", "Diseños únicos que cuentan historias", "✧", "/categoria/remeras"),
    ("buzos", "Buzos", "Confort místico para tus días", "◆", "/categoria/buzos"),
    ("pantalones", "Pantalones", "Movimiento y estilo en armonía", "☆", "/categoria/pantalones"),
]

# id, nombre, categoria, precio, precio_anterior, nuevo, tallas, imagenes,
# descripcion, caracteristicas, colores
PRODUCTS = [
    (
        "rem-1", "Arcana Nº1", "remeras", 45, 60, True, TALLAS_ROPA,
        ["/images/remera-1.jpg", "/images/remera-1-alt.jpg"],
        "Remera premium con diseño místico y acabado suave.",
        ["100% algodón orgánico", "Diseño serigrafado a mano", "Corte regular fit", "Edición limitada"],
        ["#000000", "#FFFFFF", "#DAA520", "#8B4513"],
    ),
    (
        "rem-2", "Mystic Circle", "remeras", 42, None, False, TALLAS_ROPA,
        ["/images/remera-2.jpg"],
        "Círculo místico bordado con detalles en hilo dorado.",
        None, ["#000000", "#1a1a1a"],
    ),
    (
        "rem-3", "Digital Tarot", "remeras", 48, None, True, TALLAS_ROPA,
        ["/images/remera-3.jpg"],
        "Fusión de tarot tradicional con estética cyberpunk.",
        None, ["#FFFFFF", "#DAA520"],
    ),
    (
        "rem-4", "Sacred Geometry", "remeras", 50, 65, False, TALLAS_ROPA,
        ["/images/remera-4.jpg"],
        "Geometría sagrada en alta definición.",
        None, ["#000000", "#2a2a2a", "#3a3a3a"],
    ),
    (
        "buz-1", "Ethereal Hoodie", "buzos", 85, 110, True, TALLAS_ROPA,
        ["/images/buzo-1.jpg", "/images/buzo-1-alt.jpg"],
        "Buzo con capucha premium, ultra suave y cálido.",
        ["Tejido premium extra suave", "Capucha ajustable", "Bolsillo canguro amplio", "Puños y bajo elastizados"],
        ["#000000", "#1a1a1a", "#DAA520"],
    ),
    (
        "buz-2", "Cosmic Energy", "buzos", 90, None, False, TALLAS_ROPA,
        ["/images/buzo-2.jpg"],
        "Energía cósmica plasmada en tejido premium.",
        None, ["#FFFFFF", "#f0f0f0"],
    ),
    (
        "buz-3", "Lunar Phase", "buzos", 95, None, True, TALLAS_ROPA,
        ["/images/buzo-3.jpg"],
        "Fases lunares en diseño minimalista elegante.",
        None, ["#000000", "#2a2a2a", "#FFFFFF"],
    ),
    (
        "buz-4", "Astral Journey", "buzos", 88, 115, False, TALLAS_ROPA,
        ["/images/buzo-4.jpg"],
        "Viaje astral representado en bordados detallados.",
        None, ["#DAA520", "#FFD700", "#8B4513"],
    ),
    (
        "pant-1", "Void Walker", "pantalones", 75, None, True, TALLAS_PANTALON,
        ["/images/pantalon-1.jpg"],
        "Pantalón cargo con múltiples bolsillos tácticos.",
        ["Tela resistente y flexible", "8 bolsillos funcionales", "Cintura ajustable", "Corte carpenter"],
        ["#000000", "#1a1a1a"],
    ),
    (
        "pant-2", "Dimensional Cargo", "pantalones", 80, None, False, TALLAS_PANTALON,
        ["/images/pantalon-2.jpg"],
        "Cargo multidimensional con diseño futurista.",
        None, ["#000000", "#2a2a2a", "#8B4513"],
    ),
    (
        "pant-3", "Quantum Jogger", "pantalones", 72, 95, False, TALLAS_PANTALON,
        ["/images/pantalon-3.jpg"],
        "Jogger deportivo con tecnología de tejido avanzada.",
        None, ["#000000", "#FFFFFF"],
    ),
    (
        "pant-4", "Parallel Lines", "pantalones", 78, None, True, TALLAS_PANTALON,
        ["/images/pantalon-4.jpg"],
        "Líneas paralelas que desafían las dimensiones.",
        None, ["#1a1a1a", "#3a3a3a"],
    ),
]

# id, nombre, badge, size, precio, nuevo, imagenes, descripcion,
# caracteristicas, colores. All belong to remeras.
FEATURED = [
    (
        "featured-1", "OBSIDIAN_ESSENCE", "EXCLUSIVO", "featured", 89, False,
        ["/images/featured/obsidian.jpg", "/images/featured/obsidian-alt.jpg"],
        "Pieza exclusiva de la colección Obsidian. Diseño único con detalles en oro.",
        ["Edición limitada 50 unidades", "Bordado artesanal en oro", "Tela premium importada", "Certificado de autenticidad"],
        ["#1a1a1a", "#D4AF37", "#f5f5f5"],
    ),
    (
        "featured-2", "GOLDEN_VOID", None, "normal", 85, False,
        ["/images/featured/golden-void.jpg"],
        "El vacío dorado materializado en tela premium.",
        None, ["#1a1a1a", "#6b7280", "#1e3a8a"],
    ),
    (
        "featured-3", "AMBER_RITUAL", None, None, 92, True,
        ["/images/featured/amber.jpg"],
        "Ritual del ámbar. Diseño ceremonial para los elegidos.",
        None, ["#D4AF37", "#1a1a1a", "#854d0e"],
    ),
    (
        "featured-4", "ELDRITCH_LUXURY", None, "wide", 88, False,
        ["/images/featured/eldritch.jpg"],
        "Lujo ancestral. Para quienes comprenden el misterio.",
        None, ["#f5f5f5", "#1a1a1a"],
    ),
    (
        "featured-5", "SOLAR_GOLD", None, None, 90, False,
        ["/images/featured/solar.jpg"],
        "Oro solar capturado en tejido premium.",
        None, ["#D4AF37", "#FFD700"],
    ),
    (
        "featured-6", "COSMIC_GOLD", None, "tall", 95, True,
        ["/images/featured/cosmic.jpg"],
        "El cosmos dorado en su máxima expresión.",
        None, ["#D4AF37", "#1a1a1a", "#FFD700"],
    ),
]


def _attach_media(product, imagenes, colores):
    ProductImage.objects.bulk_create(
        [
            ProductImage(producto=product, url=url, es_principal=(i == 0), orden=i)
            for i, url in enumerate(imagenes)
        ]
    )
    ProductColor.objects.bulk_create(
        [ProductColor(producto=product, hex=value) for value in colores]
    )


def _create_product(categoria, pid, defaults, tallas, caracteristicas, imagenes, colores):
    product = Product(id=pid, categoria=categoria, **defaults)
    product.tallas = tallas
    product.caracteristicas = caracteristicas
    product.save(force_insert=True)
    _attach_media(product, imagenes, colores)
    return product


class Command(BaseCommand):
    help = "Seed the store catalog (categories, products, images and colors)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete existing orders and catalog data before seeding",
        )
        parser.add_argument(
            "--with-featured",
            action="store_true",
            help="Also load the six featured collection pieces (filed under remeras)",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            Order.objects.all().delete()
            Product.objects.all().delete()
            Category.objects.all().delete()

        if Category.objects.exists():
            self.stdout.write("Catalog already seeded; nothing to do.")
            logger.info("Seed skipped; catalog not empty")
            return

        self.stdout.write("Seeding categories...")
        by_slug = {}
        for slug, nombre, descripcion, icono, ruta in CATEGORIES:
            by_slug[slug] = Category.objects.create(
                slug=slug, nombre=nombre, descripcion=descripcion, icono=icono, ruta=ruta
            )

        self.stdout.write("Seeding products...")
        created = 0
        for (
            pid, nombre, slug, precio, precio_anterior, nuevo, tallas,
            imagenes, descripcion, caracteristicas, colores,
        ) in PRODUCTS:
            _create_product(
                by_slug[slug],
                pid,
                {
                    "nombre": nombre,
                    "precio": precio,
                    "precio_anterior": precio_anterior,
                    "nuevo": nuevo,
                    "descripcion": descripcion,
                },
                tallas,
                caracteristicas,
                imagenes,
                colores,
            )
            created += 1

        if options["with_featured"]:
            self.stdout.write("Seeding featured collection...")
            for (
                pid, nombre, badge, size, precio, nuevo,
                imagenes, descripcion, caracteristicas, colores,
            ) in FEATURED:
                _create_product(
                    by_slug["remeras"],
                    pid,
                    {
                        "nombre": nombre,
                        "badge": badge,
                        "size": size,
                        "precio": precio,
                        "nuevo": nuevo,
                        "descripcion": descripcion,
                    },
                    TALLAS_ROPA,
                    caracteristicas,
                    imagenes,
                    colores,
                )
                created += 1

        logger.info("Seed completed", categories=len(by_slug), products=created)
        self.stdout.write(self.style.SUCCESS(f"Seed complete: {len(by_slug)} categories, {created} products"))
