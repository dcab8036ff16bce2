UPPER_STRING = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Enigma I wheels (wiring, notch) and the wide B reflector
WIRINGS = {
    "I": ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II": ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
}
REFLECTOR_B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"
