# Byte size in bits
BYTESIZE = 8
# 1 + maximum value of a byte
BMAX = 2**BYTESIZE
# Maximum value of a byte
BMASK = BMAX-1

# Width of the id fields in the binary format
IDSIZE = 2*BYTESIZE
IDMASK = 2**IDSIZE-1

# Instruction IDs, numbering is part of the binary format
CREATE_LIST, SET_VALUE, SET_STRING, OUTPUT_LIST, REFERENCE_LIST, HALT = range(6)

# Instruction names as printed by the disassembler
INSTR = ["CREATE_LIST", "SET_VALUE", "SET_STRING", "OUTPUT_LIST", "REFERENCE_LIST", "HALT"]

# Machine status
READY, RUNNING, HALTED, FAILED, EXHAUSTED = range(5)

# Halt output scan: ids 1..len(lists)+SCANSLACK, or every registered id
BOUNDED, REGISTERED = "bounded", "registered"
SCANMODES = [BOUNDED, REGISTERED]
SCANSLACK = 10

# Bytes rendered as characters, everything else as [N]
PRINTMIN = 32
PRINTMAX = 126

# Binary container header
MAGIC = b"MLIST"
VERSION = (1, 0)
EXTENSION = ".mlist"
SOURCE_EXTENSION = ".ml"
# Longest value the 1 byte length field can describe
MAXVALUE = BMASK
