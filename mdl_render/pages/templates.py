"""Fixed page template and default stylesheet.

The template is a Jinja2 source string rendered against ViewData. Title,
description and version are autoescaped; CSS, Mermaid source and Mermaid
config are trusted and inserted verbatim.
"""

LIVERELOAD_URL = "http://localhost:35729/livereload.js"
MERMAID_URL = "https://cdn.jsdelivr.net/npm/mermaid/dist/mermaid.min.js"

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
	<meta charset="utf-8">
	<title>{{ title }}</title>
	<style>
		{{ css|safe }}
	</style>
</head>
<body>
	<div class="title">
		{{ title }}
	</div>
	<div>
		<div class="description">
			{{ description }}
		</div>
		<div class="version" style="text-align: right">
			{{ version }}
		</div>
	</div>
	<div id="diagram"></div>
	<script src="{{ livereload_url }}"></script>
	<script src="{{ mermaid_url }}"></script>
	<script>
		var mermaidAPI = mermaid.mermaidAPI;
		mermaidAPI.initialize({
			securityLevel: 'loose',
			theme: 'neutral',
			startOnLoad:false{% if mermaid_config %},
			...{{ mermaid_config|safe }}{% endif %}
		});
		var element = document.getElementById("diagram");
		var insertSvg = function(svgCode, bindFunctions) {
			element.innerHTML = svgCode;
		};
		var src = `{{ mermaid_source|safe }}`;
		var graph = mermaidAPI.render("mermaid", src, insertSvg);
	</script>
</body>
</html>
"""

DEFAULT_CSS = """
body {
	padding: 10px;
	font-family: Arial;
}

.title {
	font-size: 120%;
	font-weight: bold;
	padding-bottom: 1em;
}

.version {
	font-size: 80%;
}

.element {
	font-family: Arial;
}

.element-title {
	font-weight: bold;
	padding-bottom: 0.8em;
}

.element-description {
	font-size: 80%;
}

.relationship {
	font-family: Arial;
	font-size: 80%;
	background-color: white;
}

.relationship-label {
}

.relationship-technology {
}
"""
