"""MOD structure: data types, loader, size rule and encoder.

Layout (big-endian words):
  title[20]
  (slots-1) x { name[22] length(w) finetune(b) volume(b) loop_start(w) loop_len(w) }
  positions(b) ignored(b) table[128]
  tag[4]                      only when the tag is recognized
  patterns x 64 rows x channels x note[4]
  waveforms, length*2 bytes each, in slot order
"""
import logging,struct

from .conf import TITLE,NAME,INSTR,NOTE,ROWS,TABLE_LEN,TAG,MOD_TAGS
from .errors import SizeMismatch,flag
from .fmt import Fmt,detect
from .reader import Reader,open_source

log=logging.getLogger(__name__)

# ── data types ────────────────────────────────────────────────────────────────
class Note(tuple):
 """(inst, period, eff, prm); inst 0 = keep, period 0 = no new pitch."""
 __slots__=()
 def __new__(cls,inst=0,period=0,eff=0,prm=0):
  return tuple.__new__(cls,(inst,period,eff,prm))
 inst=property(lambda s:s[0])
 period=property(lambda s:s[1])
 eff=property(lambda s:s[2])
 prm=property(lambda s:s[3])
 hi=property(lambda s:s[3]>>4)
 lo=property(lambda s:s[3]&0xF)
 def __repr__(self):return 'Note(inst=%d, period=%d, eff=%d, prm=%d)'%self

BLANK=Note()

class Inst:
 """Instrument slot. length, loop_start and loop_len are in words (2 bytes)."""
 __slots__=('name','ft','ftb','vol','loop_start','loop_len','length','data')
 def __init__(self,name='',length=0,ft=0,vol=64,loop_start=0,loop_len=0,data=b''):
  self.name=name;self.length=length;self.ft=ft;self.vol=vol
  self.ftb=None             # finetune byte as stored, high nibble included
  self.loop_start=loop_start;self.loop_len=loop_len;self.data=data
 @property
 def real(self):return self.length>=2     # 0 and 1 are both "no waveform"
 def __repr__(self):
  return f"Inst({self.name!r}, {len(self.data)} bytes, ft {self.ft}, v {self.vol}, rep {self.loop_start} {self.loop_len})"

class Pattern:
 __slots__=('rows',)
 def __init__(self,rows):
  self.rows=tuple(tuple(r) for r in rows)
 def __getitem__(self,i):return self.rows[i]
 def __len__(self):return len(self.rows)

class Module:
 def __init__(self,title='',fmt=None,table=(),instruments=None,patterns=()):
  self.title=title
  self.fmt=fmt or Fmt('M.K.',*MOD_TAGS[b'M.K.'])
  self.table=list(table)
  self.table_raw=None       # all 128 table bytes as read
  self.restart=0            # the byte after the position count
  self.positions=None       # position count byte as read, may exceed 128
  self.instruments=instruments if instruments is not None else [None]+[Inst() for _ in range(self.fmt.instruments-1)]
  self.patterns=list(patterns)
  self.size=0;self.unread=0
  self.blank='small'        # which blank-slot convention the size matched
  self.diags=[]
 channels=property(lambda s:s.fmt.channels)
 slots=property(lambda s:s.fmt.instruments)
 def row(self,o,r):return self.patterns[self.table[o]][r]
 def __repr__(self):
  return f"Module({self.title!r}, {self.fmt!r}, table={self.table})"

# ── notes ─────────────────────────────────────────────────────────────────────
def decode_note(b):
 return Note((b[0]&0xF0)|(b[2]>>4),((b[0]&0xF)<<8)|b[1],b[2]&0xF,b[3])

def encode_note(n):
 return bytes(((n.inst&0xF0)|((n.period>>8)&0xF),n.period&0xFF,
               ((n.inst&0xF)<<4)|(n.eff&0xF),n.prm&0xFF))

def finetune(b):
 """Signed 4-bit finetune: 0..7 as is, 8..15 -> -8..-1."""
 ft=b&0xF
 return ft-16 if ft>7 else ft

# ── size rule ─────────────────────────────────────────────────────────────────
def expected_size(m):
 """(small, large): file size with blank slots holding 0 or 2 bytes."""
 real=m.instruments[1:]
 naive=(TITLE+INSTR*(m.slots-1)+2+TABLE_LEN+(TAG if m.fmt.known else 0)
        +m.channels*ROWS*NOTE*len(m.patterns)
        +sum(i.length*2 for i in real))
 blanks=sum(1 for i in real if i.length==0)
 return naive,naive+2*blanks

def pick_blank(m,size):
 small,large=expected_size(m)
 if size==small:return 'small'
 if size==large:return 'large'
 raise SizeMismatch(size,small,large)

# ── loader ────────────────────────────────────────────────────────────────────
def _load_inst(r,n):
 w=f'instrument {n}'
 s=Inst()
 s.name=r.text(NAME,w+' name')
 s.length=r.be16(w+' length')
 s.ftb=r.u8(w+' finetune');s.ft=finetune(s.ftb)
 s.vol=r.u8(w+' volume')
 s.loop_start=r.be16(w+' loop start')
 s.loop_len=r.be16(w+' loop length')
 return s

def load(src):
 """Parse a module from a path, bytes or a seekable binary file."""
 f,size=open_source(src)
 fm=detect(f)
 r=Reader(f)
 m=Module(fmt=fm,instruments=[None])
 m.size=size
 m.title=r.text(TITLE,'title')
 for n in range(1,fm.instruments):m.instruments.append(_load_inst(r,n))
 npos=r.u8('position count')
 m.positions=npos
 m.restart=r.u8('ignored byte')
 raw=r.raw(TABLE_LEN,'order table')
 m.table_raw=raw;m.table=list(raw[:npos])
 if any(raw[npos:]):
  flag(m.diags,log,'table_overflow','patterns continue in the table past its expected length')
 hi=max(m.table,default=0)
 if m.table and set(m.table)!=set(range(hi+1)):
  flag(m.diags,log,'pattern_gap','some pattern numbers are not in the table')
 if fm.known:r.raw(TAG,'format tag')
 nc=fm.channels
 for p in range(hi+1):
  rows=[]
  for i in range(ROWS):
   rows.append(tuple(decode_note(r.raw(NOTE,f'pattern {p} row {i} channel {ch}')) for ch in range(nc)))
  m.patterns.append(Pattern(rows))
 m.blank=pick_blank(m,size)
 for n,s in enumerate(m.instruments[1:],1):
  nb=2 if s.length==0 and m.blank=='large' else s.length*2
  s.data=r.raw(nb,f'instrument {n} waveform')
 m.unread=r.drain()
 if m.unread:
  flag(m.diags,log,'trailing',f'{m.unread} unread bytes after the last waveform')
 log.debug('loaded %r: %d patterns, %d bytes',m.title,len(m.patterns),size)
 return m

# ── encoder ───────────────────────────────────────────────────────────────────
def _pad(s,n):return s.encode('latin-1')[:n].ljust(n,b'\x00')

def encode(m):
 """Re-emit m in file layout; encode(load(b))==b."""
 out=bytearray(_pad(m.title,TITLE))
 for s in m.instruments[1:]:
  out+=_pad(s.name,NAME)
  ftb=s.ftb if s.ftb is not None and finetune(s.ftb)==s.ft else s.ft&0xF
  out+=struct.pack('>HBBHH',s.length,ftb,s.vol,s.loop_start,s.loop_len)
 table=m.table_raw if m.table_raw is not None else bytes(m.table).ljust(TABLE_LEN,b'\x00')
 npos=m.positions
 if npos is None or min(npos,TABLE_LEN)!=len(m.table):npos=len(m.table)
 out+=bytes((npos,m.restart))+table
 if m.fmt.known:out+=m.fmt.tag.encode('latin-1')
 for p in m.patterns:
  for row in p.rows:
   for n in row:out+=encode_note(n)
 for s in m.instruments[1:]:out+=s.data
 return bytes(out)
