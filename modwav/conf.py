# modwav defaults

# output rate (frames/second)
SR=44100
# period -> playback rate: rate=CLOCK/period (428 -> ~8325 Hz, C-2)
CLOCK=3563219
# tag at TAG_OFFSET -> (channels, instrument slots incl. the unused slot 0)
MOD_TAGS={b'M.K.':(4,32),b'FLT4':(4,32),b'M!K!':(4,32),b'4CHN':(4,32),
 b'6CHN':(6,32),
 b'OCTA':(8,32),b'FLT8':(8,32),b'CD81':(8,32),b'8CHN':(8,32)}
TAG_OFFSET=1080

# ── layout ────────────────────────────────────────────────────────────────────
TITLE=20;NAME=22;INSTR=30;NOTE=4;ROWS=64;TABLE_LEN=128;TAG=4

# ── playback ──────────────────────────────────────────────────────────────────
SPEED=6;BPM=125
MAX_SECONDS=20*60
TAIL_SECONDS=5
# (left,right) gain by ch%4
PAN=((1/4,1/8),(1/4,1/8),(1/8,1/4),(1/8,1/4))

# effect codes
POSITION_JUMP=0xB
PATTERN_BREAK=0xD
SET_SPEED=0xF
