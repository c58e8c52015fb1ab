import warnings
from bs4 import BeautifulSoup, Tag, NavigableString, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

def get_text(detail):
	return ''.join(detail.find_all(string=True))

def collapse_spaces(text):
	return ' '.join(text.split())

def element_text(element):
	# Text of an element with <br/> treated as a word break
	parts = []
	for node in element.descendants:
		if type(node) == NavigableString:
			parts.append(str(node))
		elif is_tag_named(node, ["br"]):
			parts.append(" ")
	return collapse_spaces(''.join(parts))

def own_text_nodes(element):
	return [c for c in element.children if type(c) == NavigableString]

def is_tag_named(element, taglist):
	if type(element) != Tag:
		return False
	elif element.name in taglist:
		return True
	return False

def parse_html(text):
	return BeautifulSoup(text, 'html.parser')
