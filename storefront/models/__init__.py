from storefront.models.blog import BlogAuthor, BlogCategory, BlogLink, BlogPost
from storefront.models.brand import Brand
from storefront.models.category import Category, category_product
from storefront.models.comment import Comment
from storefront.models.customer import Customer
from storefront.models.order import Order, OrderItem
from storefront.models.product import Product
from storefront.models.user import User

__all__ = [
    "BlogAuthor",
    "BlogCategory",
    "BlogLink",
    "BlogPost",
    "Brand",
    "Category",
    "Comment",
    "Customer",
    "Order",
    "OrderItem",
    "Product",
    "User",
    "category_product",
]
