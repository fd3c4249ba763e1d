"""Pitch-shifting an instrument's waveform to the output rate."""
import numpy as np

from .conf import SR,CLOCK

# signed byte v -> (v*257+128)/32768: 127 -> 32767/32768, -128 -> -1.0
_s8f=lambda r:(np.frombuffer(bytes(r),dtype=np.int8).astype(np.float32)*257.0+128.0)/32768.0

def frame_count(raw_count,period,rate=SR):
 """Output frames for raw_count source bytes played at period."""
 return int(round(rate*raw_count*period/CLOCK))

def resample(raw,period,rate=SR):
 """Linear-interpolated copy of raw (signed 8-bit bytes) at period -> float32 (n,2)."""
 d=_s8f(raw);L=len(d)
 n=frame_count(L,period,rate) if L else 0
 out=np.zeros((n,2),dtype=np.float32)
 if n==0:return out
 # last frame straight from the last sample, no lookahead
 out[n-1]=d[L-1]
 if n>1:
  # multiply before dividing so exact source indices stay exact
  idx=np.arange(n-1,dtype=np.float64)*(L-1)/(n-1)
  ip=idx.astype(np.int64)
  ip1=np.minimum(ip+1,L-1)
  frac=idx-ip
  v=(d[ip]+(d[ip1]-d[ip])*frac).astype(np.float32)
  out[:n-1,0]=v;out[:n-1,1]=v
 return out

class Cache:
 """(slot, period) -> resampled waveform, computed on first use."""
 def __init__(self,module,rate=SR):
  self.mod=module;self.rate=rate;self._w={}
 def get(self,slot,period):
  k=(slot,period)
  w=self._w.get(k)
  if w is None:
   s=self.mod.instruments[slot]
   w=resample(s.data,period,self.rate) if s is not None and s.real else np.zeros((0,2),dtype=np.float32)
   self._w[k]=w
  return w
 def __len__(self):return len(self._w)
 def __contains__(self,k):return k in self._w
