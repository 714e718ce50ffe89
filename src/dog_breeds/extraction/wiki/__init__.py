# ABOUTME: Wikipedia-specific extraction: breed list wikitext and title redirects
# ABOUTME: Both talk to the MediaWiki action API through the injected fetch capability
