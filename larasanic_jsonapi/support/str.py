"""
String Helper Functions
Laravel-style string manipulation utilities
"""
import re


class Str:
    """
    String manipulation helper class (Laravel-style)

    Used by the route compiler to turn resource types and relationship
    names into URL segments.
    """

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Example:
            Str.snake('BlogPost')  # 'blog_post'
            Str.snake('blogPosts')  # 'blog_posts'
        """
        if not value:
            return value

        value = value.replace(' ', delimiter)

        # Insert delimiter before uppercase letters
        value = re.sub('(.)([A-Z][a-z]+)', r'\1' + delimiter + r'\2', value)
        value = re.sub('([a-z0-9])([A-Z])', r'\1' + delimiter + r'\2', value)

        value = value.lower()
        value = re.sub(f'{re.escape(delimiter)}+', delimiter, value)

        return value.strip(delimiter)

    @staticmethod
    def dasherize(value: str) -> str:
        """
        Convert a camelCase, snake_case or dashed string to a dasherized
        URL segment

        Example:
            Str.dasherize('blogPosts')  # 'blog-posts'
            Str.dasherize('blog_posts')  # 'blog-posts'
            Str.dasherize('blog-posts')  # 'blog-posts'
        """
        if not value:
            return value

        return Str.snake(value.replace('_', '-'), '-')
