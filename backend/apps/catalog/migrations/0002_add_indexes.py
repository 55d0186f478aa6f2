from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.AddIndex(
            model_name="product",
            index=models.Index(fields=["nombre"], name="product_nombre_idx"),
        ),
        migrations.AddIndex(
            model_name="product",
            index=models.Index(fields=["precio"], name="product_precio_idx"),
        ),
        migrations.AddIndex(
            model_name="product",
            index=models.Index(fields=["nuevo"], name="product_nuevo_idx"),
        ),
        migrations.AddIndex(
            model_name="productimage",
            index=models.Index(
                fields=["producto", "orden"], name="image_producto_orden_idx"
            ),
        ),
    ]
