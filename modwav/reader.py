"""Forward-only field reader over a binary source."""
import io,os,struct
from pathlib import Path

from .errors import Truncated

def open_source(src):
 """Path, bytes-like or seekable binary file -> (file object, size)."""
 if isinstance(src,(bytes,bytearray,memoryview)):
  f=io.BytesIO(bytes(src))
 elif isinstance(src,(str,os.PathLike)):
  f=io.BytesIO(Path(src).read_bytes())
 else:f=src
 here=f.tell();size=f.seek(0,io.SEEK_END);f.seek(here)
 return f,size

class Reader:
 __slots__=('f','pos')
 def __init__(self,f,pos=0):
  self.f=f;self.pos=pos

 def raw(self,n,what='bytes'):
  b=self.f.read(n) if n else b''
  if len(b)<n:raise Truncated(what,self.pos,n,len(b))
  self.pos+=n
  return b

 def u8(self,what='byte'):return self.raw(1,what)[0]

 def be16(self,what='word'):return struct.unpack('>H',self.raw(2,what))[0]

 def text(self,n,what='string'):
  """Fixed-length null-padded string, trailing nulls trimmed."""
  return self.raw(n,what).rstrip(b'\x00').decode('latin-1')

 def drain(self):
  """Consume and count whatever is left."""
  n=0
  while True:
   b=self.f.read(65536)
   if not b:break
   n+=len(b)
  self.pos+=n
  return n
