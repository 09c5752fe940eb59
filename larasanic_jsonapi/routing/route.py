"""
Route Class
Represents a single compiled route with fluent API (Laravel-style)
"""
from typing import Union, List, Dict, Optional, Callable, Any
import re


class Route:
    """
    Route class with fluent API for defining routes

    Usage:
        route = Route(['GET'], '{resource_id}', {'controller': ArticlesController, 'method': 'read'})
        route.prefix('articles').name('articles.read').defaults('resource_type', 'articles')
    """

    PARAMETER_PATTERN = r'\{(\w+)\??}'

    def __init__(
        self,
        methods: List[str],
        uri: str,
        action: Union[Callable, str, Dict]
    ):
        """
        Initialize a Route instance

        Args:
            methods: HTTP methods (GET, POST, etc.)
            uri: Route URI pattern
            action: Handler function, controller string, or action dict
        """
        self.methods = [m.upper() for m in methods]
        self.uri = uri.strip('/')
        self.action = action
        self._name: Optional[str] = None
        self._middleware: List[str] = []
        self._wheres: Dict[str, str] = {}
        self._defaults: Dict[str, Any] = {}
        self._prefix: str = ''
        self._group_name_prefix: Optional[str] = None
        self._controller: Any = None
        self._compiled_uri: Optional[str] = None
        self._parameter_names: List[str] = []

        if isinstance(action, str) and '@' in action:
            self._controller, self._action_name = action.split('@')
        elif isinstance(action, dict):
            # {'controller': ArticlesController, 'method': 'read'}
            self._controller = action.get('controller')
            self._action_name = action.get('method', action.get('uses'))
        else:
            self._action_name = getattr(action, '__name__', 'Closure')

        self._parse_parameters()

    def _parse_parameters(self):
        """Extract parameter names from URI pattern"""
        self._parameter_names = re.findall(self.PARAMETER_PATTERN, self.get_uri())

    def name(self, name: str) -> 'Route':
        """
        Set the route name, always behind the group name prefix

        A name that already starts with the prefix is still prefixed:
        'relationships.author' in group 'relationships.' becomes
        'relationships.relationships.author'.

        Returns:
            Self for method chaining
        """
        self._name = (self._group_name_prefix or '') + name
        return self

    def middleware(self, middleware: Union[str, List[str]]) -> 'Route':
        """
        Add middleware to the route

        Args:
            middleware: Middleware name or list of middleware names

        Returns:
            Self for method chaining
        """
        if isinstance(middleware, str):
            middleware = [middleware]
        self._middleware.extend(middleware)
        return self

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'Route':
        """
        Add parameter constraints

        Usage:
            route.where('resource_id', '[0-9]+')
        """
        if isinstance(parameter, dict):
            self._wheres.update(parameter)
        elif pattern is not None:
            self._wheres[parameter] = pattern
        self._compiled_uri = None
        return self

    def defaults(self, key: Union[str, Dict], value: Any = None) -> 'Route':
        """
        Set default values for parameters

        Defaults are merged into the matched parameters, which is how
        JSON:API routes carry their resource type and relationship name.
        """
        if isinstance(key, dict):
            self._defaults.update(key)
        else:
            self._defaults[key] = value
        return self

    def prefix(self, prefix: str) -> 'Route':
        """
        Add a prefix to the route URI (accumulates for nested groups)
        """
        prefix = prefix.strip('/')
        if not prefix:
            return self

        if self._prefix:
            self._prefix = f"{self._prefix}/{prefix}"
        else:
            self._prefix = prefix

        self._compiled_uri = None
        self._parse_parameters()
        return self

    def get_name(self) -> Optional[str]:
        """Get the route name"""
        return self._name

    def get_group_name_prefix(self) -> Optional[str]:
        return self._group_name_prefix

    def get_controller(self) -> Any:
        return self._controller

    def get_controller_method(self) -> str:
        return self._action_name

    def get_action_name(self) -> str:
        """Get the action name (for display)"""
        if self._controller:
            controller = self._controller
            if not isinstance(controller, str):
                controller = getattr(controller, '__name__', type(controller).__name__)
            return f"{controller}@{self._action_name}"
        return self._action_name

    def get_uri(self) -> str:
        """Get the full URI with prefix"""
        if self._prefix:
            return f"{self._prefix}/{self.uri}".strip('/')
        return self.uri

    def get_compiled_uri(self) -> str:
        """
        Get URI with constraints applied (for Sanic routing)

        Converts Laravel-style {id} to Sanic-style <id> or <id:type>
        """
        if self._compiled_uri is not None:
            return self._compiled_uri

        def convert_param(match):
            param_name = match.group(1)
            constraint = self._wheres.get(param_name)

            if constraint is None:
                return f"<{param_name}>"
            if constraint == r'[0-9]+':
                return f"<{param_name}:int>"
            if constraint.startswith(r'[0-9a-fA-F]{8}'):
                return f"<{param_name}:uuid>"
            if constraint == r'[a-zA-Z0-9\-]+':
                return f"<{param_name}:slug>"

            # Sanic accepts an inline regex as the parameter type
            return f"<{param_name}:{constraint}>"

        self._compiled_uri = re.sub(self.PARAMETER_PATTERN, convert_param, self.get_uri())
        return self._compiled_uri

    def get_middleware(self) -> List[str]:
        """Get route middleware"""
        return self._middleware

    def get_methods(self) -> List[str]:
        """Get HTTP methods"""
        return self.methods

    def get_action(self) -> Union[Callable, str, Dict]:
        """Get route action"""
        return self.action

    def get_parameter_names(self) -> List[str]:
        """Get parameter names from URI"""
        return self._parameter_names

    def get_wheres(self) -> Dict[str, str]:
        """Get parameter constraints"""
        return self._wheres

    def get_defaults(self) -> Dict[str, Any]:
        """Get default parameter values"""
        return self._defaults

    def _regex(self) -> str:
        # re.split alternates literal text and captured parameter names
        parts = []
        for index, part in enumerate(re.split(self.PARAMETER_PATTERN, self.get_uri())):
            if index % 2:
                constraint = self._wheres.get(part, '[^/]+')
                parts.append(f"(?P<{part}>{constraint})")
            else:
                parts.append(re.escape(part))
        return '^' + ''.join(parts) + '$'

    def extract_parameters(self, uri: str) -> Optional[Dict[str, Any]]:
        """
        Match a request URI against this route

        Returns:
            Route defaults merged with the resolved path parameters, or None
            if the URI does not match
        """
        match = re.match(self._regex(), uri.strip('/'))
        if match is None:
            return None

        parameters = dict(self._defaults)
        parameters.update(match.groupdict())
        return parameters

    def matches(self, uri: str, method: str) -> bool:
        """
        Check if route matches given URI and method

        Args:
            uri: Request URI
            method: HTTP method

        Returns:
            True if route matches
        """
        if method.upper() not in self.methods:
            return False

        return self.extract_parameters(uri) is not None

    def __repr__(self) -> str:
        """String representation of route"""
        methods_str = '|'.join(self.methods)
        name_str = f" (name: {self._name})" if self._name else ""
        return f"<Route [{methods_str}] {self.get_uri()}{name_str}>"
