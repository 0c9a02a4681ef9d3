"""
Cotizador SHACMAN — HTML Templates
Quote form with live price preview and share links.
"""

BASE_CSS = """
:root{--bg:#f9fafb;--sf:#ffffff;--bd:#e5e7eb;--tx:#111827;--tx2:#4b5563;
--ac:#1d4ed8;--ac2:#1e40af;--gn:#16a34a;--rd:#dc2626;--info:#eff6ff;--info-bd:#bfdbfe;--r:10px}
*{margin:0;padding:0;box-sizing:border-box}
body{font-family:system-ui,-apple-system,'Segoe UI',sans-serif;background:var(--bg);color:var(--tx);min-height:100vh;padding:32px 0}
.ctr{max-width:960px;margin:0 auto;padding:0 16px}
.hdr{text-align:center;margin-bottom:32px}
.hdr h1{font-size:28px;font-weight:700;margin-bottom:6px}
.hdr p{color:var(--tx2)}
.grid{display:grid;grid-template-columns:1fr 1fr;gap:24px}
@media(max-width:860px){.grid{grid-template-columns:1fr}}
.card{background:var(--sf);border:1px solid var(--bd);border-radius:var(--r);padding:20px;margin-bottom:20px}
.card-t{font-size:18px;font-weight:600;margin-bottom:4px}
.card-d{font-size:13px;color:var(--tx2);margin-bottom:16px}
.row2{display:grid;grid-template-columns:1fr 1fr;gap:12px}
.fld{margin-bottom:14px}
.fld label{display:block;font-size:13px;font-weight:600;margin-bottom:6px}
.fld input,.fld select,.fld textarea{width:100%;padding:8px 10px;border:1px solid var(--bd);border-radius:6px;font-size:14px;font-family:inherit;background:#fff}
.btn{width:100%;padding:11px 14px;font-size:15px;font-weight:600;border-radius:6px;border:1px solid var(--ac);background:var(--ac);color:#fff;cursor:pointer}
.btn:hover{background:var(--ac2)}
.btn:disabled{opacity:.5;cursor:not-allowed}
.btn-o{background:transparent;color:var(--tx);border-color:var(--bd);margin-bottom:10px}
.btn-o:hover{background:var(--bg)}
.sum-r{display:flex;justify-content:space-between;margin-bottom:10px;font-size:14px}
.sum-r span:first-child{font-weight:600}
.sum-disc{color:var(--rd)}
.sum-tot{font-size:18px;font-weight:700}
.sum-tot span:last-child{color:var(--gn)}
hr{border:none;border-top:1px solid var(--bd);margin:8px 0 12px}
.info{background:var(--info);border-color:var(--info-bd);font-size:12px;color:#1e3a8a}
.info ul{list-style:none;margin-top:6px}
.info li{margin-bottom:3px}
.hidden{display:none}
"""

PAGE_FORM = """<!doctype html>
<html lang="es"><head><meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>Cotizador SHACMAN México</title>
<style>{{ css|safe }}</style>
</head><body>
<div class="ctr">
 <div class="hdr">
  <h1>COTIZADOR SHACMAN MÉXICO</h1>
  <p>Genera cotizaciones profesionales para camiones SHACMAN</p>
 </div>
 <div class="grid">
  <div class="card">
   <div class="card-t">Datos de la Cotización</div>
   <div class="card-d">Completa la información para generar la cotización</div>
   <form id="quote-form" onsubmit="generatePDF(event)">
    <div class="row2">
     <div class="fld"><label for="vendedor">Nombre del Vendedor *</label>
      <input id="vendedor" name="vendedor" placeholder="Ingresa tu nombre"></div>
     <div class="fld"><label for="cliente">Nombre del Cliente *</label>
      <input id="cliente" name="cliente" placeholder="Nombre del cliente"></div>
    </div>
    <div class="fld"><label for="empresa">Empresa</label>
     <input id="empresa" name="empresa" placeholder="Nombre de la empresa"></div>
    <div class="fld"><label for="modelo">Modelo del Camión *</label>
     <select id="modelo" name="modelo">
      <option value="">Selecciona un modelo</option>
      {% for m in models %}<option value="{{ m.id }}">{{ m.name }} - {{ m.price_label }}</option>
      {% endfor %}
     </select></div>
    <div class="fld"><label for="transmision">Transmisión</label>
     <select id="transmision" name="transmision">
      <option value="">Selecciona transmisión</option>
      {% for key, label in transmissions.items() %}<option value="{{ key }}">{{ label }}</option>
      {% endfor %}
     </select></div>
    <div class="row2">
     <div class="fld"><label for="cantidad">Cantidad de Unidades</label>
      <input id="cantidad" name="cantidad" type="number" min="1" step="1" value="1"></div>
     <div class="fld"><label for="descuento">Descuento (%)</label>
      <input id="descuento" name="descuento" type="number" min="0" max="100" step="0.1" value="0"></div>
    </div>
    <div class="fld"><label for="notas">Notas Adicionales</label>
     <textarea id="notas" name="notas" rows="4" placeholder="Información adicional, condiciones especiales, etc."></textarea></div>
    <button class="btn" id="gen-btn" type="submit">Generar Cotización</button>
   </form>
  </div>

  <div>
   <div class="card hidden" id="summary">
    <div class="card-t" style="margin-bottom:14px">Resumen de la Cotización</div>
    <div class="sum-r"><span>Modelo:</span><span id="s-modelo"></span></div>
    <div class="sum-r"><span>Precio Unitario:</span><span id="s-precio"></span></div>
    <div class="sum-r"><span>Cantidad:</span><span id="s-cantidad"></span></div>
    <div class="sum-r"><span>Subtotal:</span><span id="s-subtotal"></span></div>
    <div class="sum-r sum-disc hidden" id="s-desc-row"><span id="s-desc-lbl"></span><span id="s-desc"></span></div>
    <hr>
    <div class="sum-r sum-tot"><span>Total:</span><span id="s-total"></span></div>
    <div class="sum-r hidden" id="s-trans-row"><span>Transmisión:</span><span id="s-trans"></span></div>
    <div class="sum-r hidden" id="s-cli-row"><span>Cliente:</span><span id="s-cli"></span></div>
   </div>

   <div class="card">
    <div class="card-t">Compartir Cotización</div>
    <div class="card-d" id="share-d">Genera primero la cotización para compartir</div>
    <button class="btn btn-o" id="share-wa" type="button" onclick="shareWhatsApp()" disabled>Compartir por WhatsApp</button>
    <button class="btn btn-o" id="share-mail" type="button" onclick="shareEmail()" disabled>Compartir por Email</button>
   </div>

   <div class="card info">
    <b>Información:</b>
    <ul>
     <li>• La cotización incluye las 2 páginas de ficha técnica</li>
     <li>• Se genera una página adicional con los datos del cliente</li>
     <li>• El PDF se abre automáticamente en una nueva pestaña</li>
     <li>• Los campos marcados con * son obligatorios</li>
    </ul>
   </div>
  </div>
 </div>
</div>
<script>
const TRUCK_MODELS = {{ models|tojson }};
const TRANSMISSIONS = {{ transmissions|tojson }};
let pdfUrl = null;

const $ = id => document.getElementById(id);

function formatPrice(n){
 return new Intl.NumberFormat("es-MX",{style:"currency",currency:"MXN",minimumFractionDigits:0}).format(n);
}
function units(q){ return q + " unidad" + (q !== 1 ? "es" : ""); }

function readForm(){
 return {
  vendedor: $("vendedor").value,
  cliente: $("cliente").value,
  empresa: $("empresa").value,
  modelo: $("modelo").value,
  transmision: $("transmision").value,
  cantidad: parseFloat($("cantidad").value) || 0,
  descuento: parseFloat($("descuento").value) || 0,
  notas: $("notas").value,
 };
}

function selectedTruck(f){ return TRUCK_MODELS.find(t => t.id === f.modelo); }

function calculateTotals(f){
 const truck = selectedTruck(f);
 if(!truck) return {subtotal:0, descuentoAmount:0, total:0};
 const subtotal = truck.price * f.cantidad;
 const descuentoAmount = (subtotal * f.descuento) / 100;
 const total = subtotal - descuentoAmount;
 return {subtotal, descuentoAmount, total};
}

function refreshSummary(){
 const f = readForm();
 const truck = selectedTruck(f);
 $("summary").classList.toggle("hidden", !truck);
 if(!truck) return;
 const t = calculateTotals(f);
 $("s-modelo").textContent = truck.name;
 $("s-precio").textContent = formatPrice(truck.price);
 $("s-cantidad").textContent = units(f.cantidad);
 $("s-subtotal").textContent = formatPrice(t.subtotal);
 $("s-desc-row").classList.toggle("hidden", !(f.descuento > 0));
 $("s-desc-lbl").textContent = "Descuento (" + f.descuento + "%):";
 $("s-desc").textContent = "-" + formatPrice(t.descuentoAmount);
 $("s-total").textContent = formatPrice(t.total);
 $("s-trans-row").classList.toggle("hidden", !f.transmision);
 $("s-trans").textContent = TRANSMISSIONS[f.transmision] || "";
 $("s-cli-row").classList.toggle("hidden", !f.cliente);
 $("s-cli").textContent = f.cliente;
}

function setShareEnabled(on){
 $("share-wa").disabled = !on;
 $("share-mail").disabled = !on;
 $("share-d").textContent = on ? "Comparte la cotización generada" : "Genera primero la cotización para compartir";
}

function clearPdf(){
 if(pdfUrl){ URL.revokeObjectURL(pdfUrl); pdfUrl = null; }
 setShareEnabled(false);
}

async function generatePDF(ev){
 if(ev) ev.preventDefault();
 const f = readForm();
 if(!f.modelo || !f.vendedor || !f.cliente){
  alert("Por favor completa los campos obligatorios");
  return;
 }
 const btn = $("gen-btn");
 btn.disabled = true; btn.textContent = "Generando...";
 try{
  const r = await fetch("/api/generate-pdf", {
   method: "POST",
   headers: {"Content-Type": "application/json"},
   body: JSON.stringify(f),
  });
  if(r.ok){
   const blob = await r.blob();
   clearPdf();
   pdfUrl = URL.createObjectURL(blob);
   setShareEnabled(true);
   window.open(pdfUrl, "_blank");
  } else {
   clearPdf();
   let msg = "Error al generar el PDF";
   try{ const d = await r.json(); if(d && d.error) msg = d.error; }catch(e){}
   alert(msg);
  }
 }catch(e){
  console.error("Error:", e);
  clearPdf();
  alert("Error al generar el PDF");
 }finally{
  btn.disabled = false; btn.textContent = "Generar Cotización";
 }
}

function shareText(){
 const f = readForm();
 const truck = selectedTruck(f);
 return {f, truck, t: calculateTotals(f)};
}

function shareWhatsApp(){
 if(!pdfUrl){ alert("Primero genera la cotización"); return; }
 const {f, truck, t} = shareText();
 const message = "Cotización SHACMAN - " + (truck ? truck.name : "") +
  "\\nCliente: " + f.cliente + "\\nCantidad: " + units(f.cantidad) +
  "\\nTotal: " + formatPrice(t.total);
 window.open("https://wa.me/?text=" + encodeURIComponent(message), "_blank");
}

function shareEmail(){
 if(!pdfUrl){ alert("Primero genera la cotización"); return; }
 const {f, truck, t} = shareText();
 const name = truck ? truck.name : "";
 const subject = "Cotización SHACMAN - " + name;
 const body = "Estimado/a " + f.cliente + ",\\n\\nAdjunto encontrarás la cotización para " +
  units(f.cantidad) + " del " + name + ".\\n\\nTotal: " + formatPrice(t.total) +
  "\\n\\nSaludos,\\n" + f.vendedor;
 window.open("mailto:?subject=" + encodeURIComponent(subject) + "&body=" + encodeURIComponent(body));
}

document.querySelectorAll("#quote-form input, #quote-form select, #quote-form textarea")
 .forEach(el => el.addEventListener("input", refreshSummary));
refreshSummary();
</script>
</body></html>"""
