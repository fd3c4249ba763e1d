import pytest

from modwav.conf import ROWS
from modwav.fmt import Fmt
from modwav.mod import Module,Pattern,Inst,BLANK,encode

MK=Fmt('M.K.',4,32)

def make(table=(0,),notes=None,insts=None,fmt=MK,npat=None,title='test'):
 """Module with the given table; notes maps (pattern,row,ch) -> Note."""
 m=Module(title=title,fmt=fmt)
 for i,s in (insts or {}).items():m.instruments[i]=s
 m.table=list(table)
 npat=max(table,default=0)+1 if npat is None else npat
 notes=notes or {}
 for p in range(npat):
  grid=[[BLANK]*fmt.channels for _ in range(ROWS)]
  for (q,r,ch),n in notes.items():
   if q==p:grid[r][ch]=n
  m.patterns.append(Pattern(grid))
 return m

def build(**kw):return encode(make(**kw))

def tone(data=bytes((0,64,127,128)),**kw):
 """Instrument holding data; length in words."""
 return Inst(kw.pop('name','tone'),length=len(data)//2,data=data,**kw)

@pytest.fixture
def mk():return make

@pytest.fixture
def mkbytes():return build
