import os

def char_replace(instr):
	for char in ['(', ')', '[', ']', ',', '/', "'", ":", ";", "&", ".", "#", "’"]:
		instr = instr.replace(char, '')
	instr = instr.strip()
	instr = instr.replace(' ', '_')
	return instr.lower()

def output_dir(output, *parts):
	# Each part becomes one filesystem-safe folder below output
	path = os.path.abspath(
		os.path.join(output, *[char_replace(part) for part in parts]))
	os.makedirs(path, exist_ok=True)
	return path

def json_filename(directory, key):
	return os.path.join(directory, char_replace(str(key)) + ".json")
