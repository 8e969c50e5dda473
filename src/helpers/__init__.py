from .html import attr_class, classes, heading, item_list, link, nav_link, para

__all__ = ["attr_class", "classes", "heading", "item_list", "link", "nav_link", "para"]
